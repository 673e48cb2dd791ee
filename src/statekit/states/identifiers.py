"""
Identificadores canônicos de estados, eventos e branches.

Strings e membros de Enum são aceitos como entrada, mas toda comparação
interna usa a forma canônica: `str` internada (sys.intern).

Alvos especiais:
    - STAY: permanece no estado atual
    - BACK: reservado, ainda não implementado
"""

from __future__ import annotations

import sys
from enum import Enum, StrEnum
from typing import Any

# Tipo canônico de identificador (str internada)
Identifier = str


class SpecialTarget(StrEnum):
    """Alvos reservados que um branch pode usar no lugar de um estado."""

    STAY = "stay"
    BACK = "back"

    def __str__(self) -> str:
        return self.value


# Nomes reservados: não podem ser declarados como estados
RESERVED_TARGETS: frozenset[str] = frozenset(t.value for t in SpecialTarget)


def to_identifier(value: Any) -> Identifier:
    """
    Normaliza um valor para a forma canônica de identificador.

    Args:
        value: str ou membro de Enum (valor str usa o value, demais usam o name)

    Returns:
        str internada, sem espaços nas bordas

    Raises:
        ValueError: Se o valor for None, vazio ou de tipo não suportado
    """
    if isinstance(value, Enum):
        value = value.value if isinstance(value.value, str) else value.name
    if not isinstance(value, str):
        raise ValueError(
            f"Identificador deve ser str ou Enum, recebido: {value!r} "
            f"({type(value).__name__})"
        )
    text = value.strip()
    if not text:
        raise ValueError("Identificador não pode ser vazio")
    return sys.intern(text)


def to_optional_identifier(value: Any) -> Identifier | None:
    """Como to_identifier, mas None e vazio viram None."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return to_identifier(value)


def is_special_target(target: str) -> bool:
    """Verifica se o alvo é STAY ou BACK."""
    return target in RESERVED_TARGETS
