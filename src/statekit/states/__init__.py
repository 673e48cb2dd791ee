"""
Exports públicos do módulo statekit/states.

Identificadores canônicos e alvos especiais.
"""

from statekit.states.identifiers import (
    RESERVED_TARGETS,
    Identifier,
    SpecialTarget,
    is_special_target,
    to_identifier,
    to_optional_identifier,
)

__all__ = [
    "RESERVED_TARGETS",
    "Identifier",
    "SpecialTarget",
    "is_special_target",
    "to_identifier",
    "to_optional_identifier",
]
