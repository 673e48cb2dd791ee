"""
Exports públicos do módulo statekit/types.

Tipos e estruturas de dados para transições e ações.
"""

from statekit.types.actions import ActionRef, Closure, NamedMethod, to_action
from statekit.types.transition import Branch, Transition, TransitionRecord

__all__ = [
    "ActionRef",
    "Branch",
    "Closure",
    "NamedMethod",
    "Transition",
    "TransitionRecord",
    "to_action",
]
