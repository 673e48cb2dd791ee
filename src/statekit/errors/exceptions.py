"""Exceções da máquina de estados.

Toda falha é propagada de forma síncrona para quem chamou a operação.
Não há retry nem fallback para o estado padrão.
"""

from __future__ import annotations

from typing import Any


class StateMachineError(Exception):
    """Base para todas as falhas do statekit."""


class MissingDeciderError(StateMachineError, ValueError):
    """Transição com múltiplos branches registrada sem decider."""


class InvalidStateError(StateMachineError):
    """Base para falhas de resolução em tempo de execução.

    Attributes:
        state: Estado atual no momento da falha (pode ser None)
        event: Evento que disparou a resolução (pode ser None)
    """

    def __init__(
        self,
        message: str,
        *,
        state: str | None = None,
        event: str | None = None,
    ) -> None:
        super().__init__(message)
        self.state = state
        self.event = event


class UninitializedStateError(InvalidStateError):
    """Estado atual não definido."""


class NoTransitionError(InvalidStateError):
    """Nenhuma transição registrada para o par (estado, evento)."""


class DeciderReturnedNothingError(InvalidStateError):
    """Decider retornou None ou vazio."""

    def __init__(
        self,
        message: str,
        *,
        state: str | None = None,
        event: str | None = None,
        candidates: tuple[Any, ...] = (),
    ) -> None:
        super().__init__(message, state=state, event=event)
        self.candidates = candidates


class NoMatchingBranchError(InvalidStateError):
    """Identificador retornado pelo decider não casa com nenhum branch."""

    def __init__(
        self,
        message: str,
        *,
        state: str | None = None,
        event: str | None = None,
        decision: str | None = None,
        candidates: tuple[Any, ...] = (),
    ) -> None:
        super().__init__(message, state=state, event=event)
        self.decision = decision
        self.candidates = candidates


class BackNotImplementedError(InvalidStateError, NotImplementedError):
    """Alvo reservado `back` selecionado (ainda não implementado)."""
