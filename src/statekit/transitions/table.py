"""
Tabela de transições.

Armazena as transições em ordem de registro. A busca por (estado, evento)
devolve a primeira transição registrada; registros duplicados não são
rejeitados.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

from statekit.errors import MissingDeciderError
from statekit.rules.decider import Decider
from statekit.states.identifiers import Identifier, to_identifier
from statekit.types.transition import Branch, Transition

logger = logging.getLogger(__name__)


class TransitionTable:
    """
    Registro de transições de uma máquina.

    Preenchida uma vez, antes da criação de qualquer instância. Não há
    sincronização: leituras concorrentes só são seguras após o registro.
    """

    __slots__ = ("_transitions",)

    def __init__(self) -> None:
        self._transitions: list[Transition] = []

    def register_transition(
        self,
        state: Any,
        event: Any,
        branches: Sequence[Branch],
        decider: Decider | None = None,
    ) -> Transition:
        """
        Registra uma transição.

        Args:
            state: Estado de origem
            event: Evento que dispara a transição
            branches: Candidatos (ao menos um)
            decider: Obrigatório com mais de um branch; ignorado com um só

        Returns:
            Transição armazenada

        Raises:
            ValueError: Se não houver branches
            TypeError: Se algum item não for Branch
            MissingDeciderError: Se houver vários branches e nenhum decider
        """
        state_id = to_identifier(state)
        event_id = to_identifier(event)
        branches = tuple(branches)

        if not branches:
            raise ValueError(
                f"Transição {state_id!r}/{event_id!r} precisa de ao menos um branch"
            )
        invalid = [b for b in branches if not isinstance(b, Branch)]
        if invalid:
            raise TypeError(
                f"Transição {state_id!r}/{event_id!r}: branches devem ser Branch, "
                f"recebido: {invalid!r} (use Machine.state_transition)"
            )
        if len(branches) > 1 and decider is None:
            raise MissingDeciderError(
                f"Transição {state_id!r}/{event_id!r} com {len(branches)} branches "
                "exige um decider"
            )
        # Com um único branch o decider não participa da resolução
        if len(branches) == 1:
            decider = None

        transition = Transition(
            state=state_id,
            event=event_id,
            branches=branches,
            decider=decider,
        )
        self._transitions.append(transition)
        logger.debug("transition_registered", extra=transition.to_log_dict())
        return transition

    def lookup(self, state: Any, event: Any) -> Transition | None:
        """Primeira transição registrada para (estado, evento), ou None."""
        state_id = to_identifier(state)
        event_id = to_identifier(event)
        for transition in self._transitions:
            if transition.state == state_id and transition.event == event_id:
                return transition
        return None

    def events_for(self, state: Identifier) -> tuple[Identifier, ...]:
        """Eventos com transição a partir do estado, sem repetição."""
        seen: dict[Identifier, None] = {}
        for transition in self._transitions:
            if transition.state == state:
                seen.setdefault(transition.event, None)
        return tuple(seen)

    def __iter__(self) -> Iterator[Transition]:
        return iter(tuple(self._transitions))

    def __len__(self) -> int:
        return len(self._transitions)

