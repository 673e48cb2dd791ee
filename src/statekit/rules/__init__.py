"""
Exports públicos do módulo statekit/rules.

Deciders e seleção de branch.
"""

from statekit.rules.decider import (
    CallableDecider,
    Decider,
    NamedDecider,
    describe_decider,
    select_branch,
    to_decider,
)

__all__ = [
    "CallableDecider",
    "Decider",
    "NamedDecider",
    "describe_decider",
    "select_branch",
    "to_decider",
]
