"""
Deciders: escolha de branch em transições com múltiplos candidatos.

O decider recebe o evento e devolve um identificador que casa com o
alvo ou com o nome de um dos branches da transição.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sized
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from statekit.errors import DeciderReturnedNothingError, NoMatchingBranchError
from statekit.states.identifiers import to_identifier

if TYPE_CHECKING:
    from statekit.types.transition import Branch, Transition

logger = logging.getLogger(__name__)


@runtime_checkable
class Decider(Protocol):
    """
    Capacidade que escolhe um branch.

    `decide` devolve o identificador do branch (alvo ou nome), ou
    None/vazio para sinalizar falha.
    """

    def decide(self, owner: Any, event: str) -> Any:
        """Retorna o identificador escolhido para o evento."""
        ...


def describe_decider(decider: Decider) -> str:
    """Descrição curta do decider para logs."""
    describe = getattr(decider, "describe", None)
    if callable(describe):
        return describe()
    return type(decider).__name__


@dataclass(frozen=True, slots=True)
class NamedDecider:
    """Decider implementado como método do dono, chamado com (event)."""

    method_name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "method_name", to_identifier(self.method_name))

    def decide(self, owner: Any, event: str) -> Any:
        return getattr(owner, self.method_name)(event)

    def describe(self) -> str:
        return f"method:{self.method_name}"


@dataclass(frozen=True, slots=True)
class CallableDecider:
    """Decider como callable externo, chamado com (owner, event)."""

    fn: Callable[[Any, str], Any]

    def decide(self, owner: Any, event: str) -> Any:
        return self.fn(owner, event)

    def describe(self) -> str:
        return f"callable:{getattr(self.fn, '__qualname__', repr(self.fn))}"


def to_decider(value: Any) -> Decider | None:
    """
    Converte a especificação de decider.

    Args:
        value: None/vazio, nome de método (str), Decider ou callable

    Returns:
        Decider correspondente, ou None se ausente

    Raises:
        TypeError: Se o valor não puder representar um decider
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, str):
        return NamedDecider(value)
    if isinstance(value, Decider):
        return value
    if callable(value):
        return CallableDecider(value)
    raise TypeError(f"Decider inválido: {value!r}")


def _is_blank(decision: Any) -> bool:
    if decision is None:
        return True
    if isinstance(decision, str):
        return not decision.strip()
    if isinstance(decision, Sized):
        return len(decision) == 0
    return False


def select_branch(transition: Transition, owner: Any, event: str) -> Branch:
    """
    Resolve o branch a ser executado para a transição.

    Sem decider, o branch único é usado diretamente. Com decider, o
    identificador retornado é comparado (forma canônica) com o alvo e
    o nome de cada branch, em ordem; vence o primeiro que casar.

    Args:
        transition: Transição encontrada na tabela
        owner: Dono da máquina (passado ao decider)
        event: Evento canônico

    Returns:
        Branch escolhido

    Raises:
        DeciderReturnedNothingError: Decider retornou None/vazio
        NoMatchingBranchError: Nenhum branch casa com a decisão (inclui
            valores que não são identificadores, ex: 42 ou False)
    """
    decider = transition.decider
    if decider is None:
        return transition.branches[0]

    candidates = tuple(b.to_log_dict() for b in transition.branches)
    decision = decider.decide(owner, event)

    if _is_blank(decision):
        logger.warning(
            "decider_returned_nothing",
            extra={
                "state": transition.state,
                "event": event,
                "decider": describe_decider(decider),
            },
        )
        raise DeciderReturnedNothingError(
            f"Decider retornou vazio para {transition.state!r} com evento {event!r}. "
            f"Decisão: {decision!r}. Candidatos: {candidates!r}",
            state=transition.state,
            event=event,
            candidates=candidates,
        )

    try:
        decision_id = to_identifier(decision)
    except ValueError:
        # Valor que não vira identificador não casa com nenhum branch
        decision_id = repr(decision)
    else:
        for branch in transition.branches:
            if branch.matches(decision_id):
                return branch

    logger.warning(
        "decider_no_matching_branch",
        extra={
            "state": transition.state,
            "event": event,
            "decision": decision_id,
            "decider": describe_decider(decider),
        },
    )
    raise NoMatchingBranchError(
        f"Nenhum branch para {transition.state!r} com evento {event!r}. "
        f"Decisão: {decision_id!r}. Candidatos: {candidates!r}",
        state=transition.state,
        event=event,
        decision=decision_id,
        candidates=candidates,
    )
