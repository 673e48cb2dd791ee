"""
Definição declarativa da máquina de estados.

Uma Machine é construída uma vez por tipo dono (estados, eventos, estado
padrão) e recebe as transições via state_transition. Depois da fase de
registro ela é compartilhada, somente leitura, por todas as instâncias.

Exemplo:
    machine = Machine(states=["idle", "running"], events=["start", "stop"])
    machine.state_transition("idle", "start", next="running")
    machine.state_transition(
        "running",
        "stop",
        next={"state": "idle", "action": "on_stop"},
    )
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from statekit.rules.decider import to_decider
from statekit.states.identifiers import (
    RESERVED_TARGETS,
    Identifier,
    is_special_target,
    to_identifier,
)
from statekit.transitions.table import TransitionTable
from statekit.types.transition import Branch, Transition

# Chaves aceitas em uma especificação de branch (mapping)
BRANCH_SPEC_KEYS = frozenset({"state", "name", "action"})


def parse_branch(spec: Any) -> Branch:
    """
    Converte uma especificação de branch.

    Args:
        spec: Branch, identificador (str/Enum) ou mapping com as chaves
            state (obrigatória), name e action

    Returns:
        Branch normalizado

    Raises:
        ValueError: Mapping sem `state` ou com chaves desconhecidas
        TypeError: Tipo de especificação não suportado
    """
    if isinstance(spec, Branch):
        return spec
    if isinstance(spec, Mapping):
        unknown = {str(k) for k in spec} - BRANCH_SPEC_KEYS
        if unknown:
            raise ValueError(f"Chaves de branch desconhecidas: {sorted(unknown)}")
        if spec.get("state") is None:
            raise ValueError(f"Branch sem 'state': {dict(spec)!r}")
        return Branch(
            target=spec["state"],
            name=spec.get("name"),
            action=spec.get("action"),
        )
    if isinstance(spec, list | tuple):
        raise TypeError("Listas de branches não podem ser aninhadas")
    # str / Enum: alvo direto
    return Branch(target=spec)


def parse_next(spec: Any) -> tuple[Branch, ...]:
    """Converte `next` (branch único ou lista de branches) em tupla."""
    if isinstance(spec, list | tuple):
        return tuple(parse_branch(item) for item in spec)
    return (parse_branch(spec),)


class Machine:
    """
    Definição compartilhada: estados, eventos, estado padrão e tabela.

    Attributes:
        states: Estados declarados, em ordem
        events: Eventos declarados, em ordem
        default_state: Estado padrão explícito (pode ser None)
        table: Tabela de transições
    """

    __slots__ = ("_default_state", "_events", "_states", "table")

    def __init__(
        self,
        states: Iterable[Any],
        events: Iterable[Any],
        default_state: Any = None,
    ) -> None:
        """
        Inicializa a definição.

        Args:
            states: Estados declarados (str ou Enum)
            events: Eventos declarados (str ou Enum)
            default_state: Estado inicial das instâncias (usa o primeiro
                estado declarado se None)

        Raises:
            ValueError: Estado com nome reservado, ou default_state fora
                dos estados declarados
        """
        self._states: tuple[Identifier, ...] = tuple(to_identifier(s) for s in states)
        self._events: tuple[Identifier, ...] = tuple(to_identifier(e) for e in events)

        reserved = [s for s in self._states if s in RESERVED_TARGETS]
        if reserved:
            raise ValueError(
                f"Nomes reservados não podem ser estados: {reserved}. "
                f"Reservados: {sorted(RESERVED_TARGETS)}"
            )

        self._default_state: Identifier | None = None
        if default_state is not None:
            default_id = to_identifier(default_state)
            if default_id not in self._states:
                raise ValueError(
                    f"default_state {default_id!r} não está entre os estados declarados"
                )
            self._default_state = default_id

        self.table = TransitionTable()

    @property
    def states(self) -> tuple[Identifier, ...]:
        return self._states

    @property
    def events(self) -> tuple[Identifier, ...]:
        return self._events

    @property
    def default_state(self) -> Identifier | None:
        return self._default_state

    @property
    def initial_state(self) -> Identifier | None:
        """Estado padrão explícito, senão o primeiro declarado."""
        if self._default_state is not None:
            return self._default_state
        return self._states[0] if self._states else None

    @property
    def transitions(self) -> tuple[Transition, ...]:
        return tuple(self.table)

    def state_transition(
        self,
        state: Any,
        event: Any,
        next: Any,  # noqa: A002
        decider: Any = None,
    ) -> Transition:
        """
        Registra uma transição a partir de especificações declarativas.

        Args:
            state: Estado de origem
            event: Evento que dispara a transição
            next: Alvo, branch (mapping/Branch) ou lista de branches
            decider: Nome de método do dono, Decider ou callable

        Returns:
            Transição registrada

        Raises:
            MissingDeciderError: Lista com mais de um branch sem decider
        """
        return self.table.register_transition(
            state,
            event,
            parse_next(next),
            decider=to_decider(decider),
        )

    def lookup(self, state: Any, event: Any) -> Transition | None:
        return self.table.lookup(state, event)

    def next_state(self, state: Any, event: Any) -> Identifier | None:
        """
        Próximo estado para (estado, evento), sem executar nada.

        Returns:
            Alvo do branch único, ou None se não há transição ou se a
            escolha depende de um decider
        """
        transition = self.table.lookup(state, event)
        if transition is None or transition.sole_branch is None:
            return None
        return transition.sole_branch.target

    def validate(self) -> list[str]:
        """
        Valida a integridade da tabela.

        Verifica:
        - Estados de origem e alvos declarados
        - Eventos declarados
        - Registros duplicados de (estado, evento), que ficam sombreados

        Returns:
            Lista de erros encontrados (vazia se válido)
        """
        errors: list[str] = []
        states = set(self._states)
        events = set(self._events)
        seen: set[tuple[Identifier, Identifier]] = set()

        for index, transition in enumerate(self.table):
            label = f"#{index} {transition.state}/{transition.event}"
            if transition.state not in states:
                errors.append(f"{label}: estado de origem não declarado")
            if transition.event not in events:
                errors.append(f"{label}: evento não declarado")
            for branch in transition.branches:
                if not is_special_target(branch.target) and branch.target not in states:
                    errors.append(f"{label}: alvo {branch.target!r} não declarado")
            key = (transition.state, transition.event)
            if key in seen:
                errors.append(f"{label}: sombreada por registro anterior")
            seen.add(key)

        return errors

    def __repr__(self) -> str:
        return (
            f"Machine(states={list(self._states)!r}, events={list(self._events)!r}, "
            f"default_state={self._default_state!r}, transitions={len(self.table)})"
        )
