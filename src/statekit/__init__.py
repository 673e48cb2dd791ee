"""
statekit — máquina de estados finitos declarativa.

Estados e eventos são declarados uma vez em uma Machine; transições
(condicionais ou com efeitos colaterais) são registradas entre eles.
Em tempo de execução, cada StateMachine resolve o próximo estado para
um evento, executa a ação do branch escolhido e registra o evento em
um histórico de capacidade limitada.

Estrutura:
    - states/: Identificadores canônicos e alvos especiais (stay/back)
    - types/: Branch, Transition, ações (NamedMethod, Closure)
    - history/: Histórico FIFO limitado (BoundedHistory)
    - rules/: Deciders e seleção de branch
    - transitions/: Tabela de transições e Machine
    - manager/: Motor de resolução (StateMachine)
    - errors/: Exceções
    - config/: Logging estruturado e settings
"""

# Erros
from statekit.errors import (
    BackNotImplementedError,
    DeciderReturnedNothingError,
    InvalidStateError,
    MissingDeciderError,
    NoMatchingBranchError,
    NoTransitionError,
    StateMachineError,
    UninitializedStateError,
)

# Histórico
from statekit.history import DEFAULT_HISTORY_CAPACITY, BoundedHistory

# Manager
from statekit.manager import StateMachine, create_state_machine

# Deciders
from statekit.rules import CallableDecider, Decider, NamedDecider

# Identificadores
from statekit.states import SpecialTarget, to_identifier

# Definição
from statekit.transitions import Machine, TransitionTable

# Types
from statekit.types import (
    ActionRef,
    Branch,
    Closure,
    NamedMethod,
    Transition,
    TransitionRecord,
)

STAY = SpecialTarget.STAY
BACK = SpecialTarget.BACK

__all__ = [
    "BACK",
    "DEFAULT_HISTORY_CAPACITY",
    "STAY",
    "ActionRef",
    "BackNotImplementedError",
    "BoundedHistory",
    "Branch",
    "CallableDecider",
    "Closure",
    "Decider",
    "DeciderReturnedNothingError",
    "InvalidStateError",
    "Machine",
    "MissingDeciderError",
    "NamedDecider",
    "NamedMethod",
    "NoMatchingBranchError",
    "NoTransitionError",
    "SpecialTarget",
    "StateMachine",
    "StateMachineError",
    "Transition",
    "TransitionRecord",
    "TransitionTable",
    "UninitializedStateError",
    "create_state_machine",
    "to_identifier",
]
