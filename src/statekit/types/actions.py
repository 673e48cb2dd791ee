"""
Ações executadas quando um branch é escolhido.

ActionRef é uma variante explícita com duas formas:
    - NamedMethod: método do dono, resolvido por nome e chamado com (event)
    - Closure: callable opaco chamado com (owner, event)

O valor de retorno é sempre ignorado; exceções propagam para o chamador.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from statekit.states.identifiers import to_identifier


@dataclass(frozen=True, slots=True)
class NamedMethod:
    """Referência a um método do dono pelo nome."""

    method_name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "method_name", to_identifier(self.method_name))

    def execute(self, owner: Any, event: str) -> None:
        """Resolve o método no dono e o chama com o evento.

        Raises:
            AttributeError: Se o dono não tiver o método
            TypeError: Se o atributo não for chamável
        """
        method = getattr(owner, self.method_name)
        if not callable(method):
            raise TypeError(
                f"{type(owner).__name__}.{self.method_name} não é chamável"
            )
        method(event)

    def describe(self) -> str:
        return f"method:{self.method_name}"


@dataclass(frozen=True, slots=True)
class Closure:
    """Callable que captura estado externo."""

    fn: Callable[[Any, str], Any]

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise TypeError(f"Closure exige um callable, recebido: {self.fn!r}")

    def execute(self, owner: Any, event: str) -> None:
        self.fn(owner, event)

    def describe(self) -> str:
        return f"closure:{getattr(self.fn, '__qualname__', repr(self.fn))}"


ActionRef = NamedMethod | Closure


def to_action(value: Any) -> ActionRef | None:
    """
    Converte a especificação de ação para ActionRef.

    Args:
        value: None, nome de método (str), callable ou ActionRef

    Returns:
        ActionRef correspondente, ou None se ausente

    Raises:
        TypeError: Se o valor não puder representar uma ação
    """
    if value is None:
        return None
    if isinstance(value, NamedMethod | Closure):
        return value
    if isinstance(value, str):
        return NamedMethod(value)
    if callable(value):
        return Closure(value)
    raise TypeError(f"Ação inválida: {value!r}")
