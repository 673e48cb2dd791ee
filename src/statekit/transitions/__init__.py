"""
Exports públicos do módulo statekit/transitions.

Tabela de transições e definição declarativa da máquina.
"""

from statekit.transitions.machine import Machine, parse_branch, parse_next
from statekit.transitions.table import TransitionTable

__all__ = [
    "Machine",
    "TransitionTable",
    "parse_branch",
    "parse_next",
]
