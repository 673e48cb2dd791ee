"""
Exports públicos do módulo statekit/history.

Histórico de eventos com capacidade limitada.
"""

from statekit.history.bounded import DEFAULT_HISTORY_CAPACITY, BoundedHistory

__all__ = [
    "DEFAULT_HISTORY_CAPACITY",
    "BoundedHistory",
]
