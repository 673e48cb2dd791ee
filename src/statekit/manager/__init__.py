"""
Exports públicos do módulo statekit/manager.

Instância em tempo de execução (StateMachine).
"""

from statekit.manager.machine import StateMachine, create_state_machine

__all__ = [
    "StateMachine",
    "create_state_machine",
]
