"""
Tipos e estruturas de dados para transições de estado.

Este módulo define os registros imutáveis usados pela tabela de
transições e pelo motor de resolução.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from statekit.rules.decider import describe_decider
from statekit.states.identifiers import (
    Identifier,
    to_identifier,
    to_optional_identifier,
)
from statekit.types.actions import ActionRef, to_action

if TYPE_CHECKING:
    from statekit.rules.decider import Decider


@dataclass(frozen=True, slots=True)
class Branch:
    """
    Um resultado candidato de uma transição.

    Attributes:
        target: Estado de destino, ou alvo especial (stay/back)
        name: Identificador opcional usado pelo decider
        action: Ação opcional executada quando o branch é escolhido
    """

    target: Identifier
    name: Identifier | None = None
    action: ActionRef | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "target", to_identifier(self.target))
        object.__setattr__(self, "name", to_optional_identifier(self.name))
        object.__setattr__(self, "action", to_action(self.action))

    def matches(self, decision: Identifier) -> bool:
        """Verifica se a decisão casa com o alvo ou com o nome do branch."""
        return self.target == decision or (
            self.name is not None and self.name == decision
        )

    def to_log_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "name": self.name,
            "action": self.action.describe() if self.action else None,
        }


@dataclass(frozen=True, slots=True)
class Transition:
    """
    Regra associada a um par (estado, evento).

    Invariante: mais de um branch exige decider (validado no registro
    pela TransitionTable).

    Attributes:
        state: Estado de origem
        event: Evento que dispara a transição
        branches: Candidatos, em ordem de registro (ao menos um)
        decider: Capacidade que escolhe entre os branches (opcional)
    """

    state: Identifier
    event: Identifier
    branches: tuple[Branch, ...]
    decider: Decider | None = None

    def __post_init__(self) -> None:
        if not self.branches:
            raise ValueError("Transição deve ter ao menos um branch")

    @property
    def is_branching(self) -> bool:
        """True quando a escolha depende do decider."""
        return self.decider is not None

    @property
    def sole_branch(self) -> Branch | None:
        """Branch único, ou None quando há múltiplos candidatos."""
        return self.branches[0] if len(self.branches) == 1 else None

    def to_log_dict(self) -> dict[str, Any]:
        return {
            "state": self.state,
            "event": self.event,
            "branches": [b.to_log_dict() for b in self.branches],
            "decider": describe_decider(self.decider) if self.decider else None,
        }


@dataclass(frozen=True, slots=True)
class TransitionRecord:
    """
    Registro imutável de uma resolução concluída.

    Attributes:
        from_state: Estado antes do evento
        to_state: Estado depois do evento (igual ao anterior em stay)
        event: Evento processado
        branch_name: Nome do branch escolhido (se houver)
        timestamp: Momento da transição (UTC)
    """

    from_state: Identifier
    to_state: Identifier
    event: Identifier
    branch_name: Identifier | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_log_dict(self) -> dict[str, Any]:
        """Representação para logging estruturado."""
        return {
            "from_state": self.from_state,
            "to_state": self.to_state,
            "event": self.event,
            "branch_name": self.branch_name,
            "timestamp": self.timestamp.isoformat(),
        }
