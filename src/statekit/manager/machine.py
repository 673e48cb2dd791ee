"""
Motor de resolução: a instância em tempo de execução de uma Machine.

Cada StateMachine tem seu próprio estado atual e histórico de eventos;
a Machine (tabela de transições) é compartilhada por referência.

O tipo dono usa composição: guarda uma StateMachine e delega a ela.

Exemplo:
    class Order:
        def __init__(self) -> None:
            self.fsm = StateMachine(ORDER_MACHINE, owner=self)

        def on_paid(self, event: str) -> None:
            ...
"""

from __future__ import annotations

import logging
from typing import Any

from statekit.config.logging import log_action_failure
from statekit.config.settings import get_machine_settings
from statekit.errors import (
    BackNotImplementedError,
    NoTransitionError,
    UninitializedStateError,
)
from statekit.history.bounded import BoundedHistory
from statekit.rules.decider import select_branch
from statekit.states.identifiers import Identifier, SpecialTarget, to_identifier
from statekit.transitions.machine import Machine
from statekit.types.transition import Branch, TransitionRecord

logger = logging.getLogger(__name__)


class StateMachine:
    """
    Instância de uma máquina de estados.

    Attributes:
        machine: Definição compartilhada (estados, eventos, transições)
        owner: Objeto sobre o qual ações nomeadas e deciders são resolvidos
        current_state: Estado atual
        event_history: Eventos processados (limitado pela capacidade)
        last_transition: Última resolução concluída
    """

    __slots__ = (
        "_current_state",
        "_history",
        "_instance_id",
        "_last_transition",
        "_log_transitions",
        "_owner",
        "machine",
    )

    def __init__(
        self,
        machine: Machine,
        owner: Any = None,
        *,
        initial_state: Any = None,
        history_capacity: int | None = None,
        instance_id: str = "",
    ) -> None:
        """
        Inicializa a instância.

        Args:
            machine: Definição compartilhada
            owner: Dono das ações/deciders (usa a própria instância se None)
            initial_state: Estado inicial (usa machine.initial_state se None)
            history_capacity: Capacidade do histórico (usa settings se None)
            instance_id: Identificador da instância para logs
        """
        settings = get_machine_settings()
        self.machine = machine
        self._owner = owner
        self._instance_id = instance_id
        self._log_transitions = settings.log_transitions

        if initial_state is not None:
            self._current_state: Identifier | None = to_identifier(initial_state)
        else:
            self._current_state = machine.initial_state

        if history_capacity is None:
            history_capacity = settings.history_capacity
        self._history: BoundedHistory[Identifier] = BoundedHistory(history_capacity)
        self._last_transition: TransitionRecord | None = None

    @property
    def owner(self) -> Any:
        """Dono efetivo: o objeto informado, ou a própria instância."""
        return self if self._owner is None else self._owner

    @property
    def instance_id(self) -> str:
        return self._instance_id

    @property
    def current_state(self) -> Identifier:
        """Estado atual.

        Raises:
            UninitializedStateError: Se nenhum estado foi definido
        """
        return self._check_current_state()

    @current_state.setter
    def current_state(self, state: Any) -> None:
        self._current_state = to_identifier(state)

    @property
    def event_history(self) -> list[Identifier]:
        """Histórico de eventos (cópia, do mais antigo ao mais recente)."""
        return self._history.to_list()

    @property
    def history_capacity(self) -> int:
        return self._history.capacity

    @history_capacity.setter
    def history_capacity(self, value: int) -> None:
        self._history.capacity = value

    @property
    def last_transition(self) -> TransitionRecord | None:
        return self._last_transition

    def can_send(self, event: Any) -> bool:
        """Verifica se existe transição para o evento no estado atual."""
        if self._current_state is None:
            return False
        return self.machine.lookup(self._current_state, event) is not None

    def next_state(self, event: Any) -> Identifier | None:
        """Próximo estado previsto para o evento, sem executar nada."""
        return self.machine.next_state(self._check_current_state(), event)

    def send_event(self, event: Any) -> Identifier:
        """
        Processa um evento.

        Ordem: busca da transição, escolha do branch (decider), ação,
        mudança de estado, registro no histórico. Falhas antes da ação
        não alteram estado nem histórico. Exceções da ação propagam sem
        rollback dos efeitos já aplicados por ela.

        Args:
            event: Evento (str ou Enum)

        Returns:
            Estado atual após o processamento

        Raises:
            UninitializedStateError: Estado atual não definido
            NoTransitionError: Sem transição para (estado, evento)
            DeciderReturnedNothingError: Decider retornou vazio
            NoMatchingBranchError: Decisão não casa com nenhum branch
            BackNotImplementedError: Branch escolhido aponta para `back`
        """
        state = self._check_current_state()
        event_id = to_identifier(event)

        transition = self.machine.lookup(state, event_id)
        if transition is None:
            logger.warning(
                "event_rejected",
                extra={
                    "instance_id": self._instance_id,
                    "state": state,
                    "event": event_id,
                },
            )
            raise NoTransitionError(
                f"Nenhum próximo estado válido para {state!r} com evento {event_id!r}",
                state=state,
                event=event_id,
            )

        branch = select_branch(transition, self.owner, event_id)
        self._execute_action(branch, state, event_id)
        self._change_state(branch, event_id)
        self._history.push(event_id)

        record = TransitionRecord(
            from_state=state,
            to_state=self._current_state,  # type: ignore[arg-type]
            event=event_id,
            branch_name=branch.name,
        )
        self._last_transition = record
        if self._log_transitions:
            logger.debug(
                "state_transitioned",
                extra={"instance_id": self._instance_id, **record.to_log_dict()},
            )
        return self._current_state  # type: ignore[return-value]

    def get_state_summary(self) -> dict[str, Any]:
        """
        Retorna resumo do estado atual para observability.

        Returns:
            Dict com informações do estado (seguro para logs)
        """
        state = self._current_state
        return {
            "instance_id": self._instance_id,
            "current_state": state,
            "history_size": len(self._history),
            "history_capacity": self._history.capacity,
            "available_events": (
                list(self.machine.table.events_for(state)) if state is not None else []
            ),
        }

    def _check_current_state(self) -> Identifier:
        if self._current_state is None:
            raise UninitializedStateError(
                "Nenhum estado atual válido. Defina default_state ou declare estados "
                "na Machine, ou atribua current_state."
            )
        return self._current_state

    def _execute_action(self, branch: Branch, state: Identifier, event: Identifier) -> None:
        if branch.action is None:
            return
        try:
            branch.action.execute(self.owner, event)
        except Exception as exc:
            log_action_failure(
                logger,
                branch.action.describe(),
                state=state,
                event=event,
                instance_id=self._instance_id,
                error=exc,
            )
            raise

    def _change_state(self, branch: Branch, event: Identifier) -> None:
        target = branch.target
        if target == SpecialTarget.STAY:
            return
        if target == SpecialTarget.BACK:
            raise BackNotImplementedError(
                "Alvo 'back' é reservado mas ainda não implementado.",
                state=self._current_state,
                event=event,
            )
        self._current_state = target

    def __repr__(self) -> str:
        return (
            f"StateMachine(current_state={self._current_state!r}, "
            f"instance_id={self._instance_id!r})"
        )


def create_state_machine(
    machine: Machine,
    owner: Any = None,
    *,
    instance_id: str = "",
    initial_state: Any = None,
    history_capacity: int | None = None,
) -> StateMachine:
    """
    Factory function para criar uma instância.

    Args:
        machine: Definição compartilhada
        owner: Dono das ações/deciders
        instance_id: Identificador para logs
        initial_state: Estado inicial (opcional)
        history_capacity: Capacidade do histórico (opcional)

    Returns:
        StateMachine configurada
    """
    return StateMachine(
        machine,
        owner,
        initial_state=initial_state,
        history_capacity=history_capacity,
        instance_id=instance_id,
    )
