"""Exceções públicas do statekit."""

from statekit.errors.exceptions import (
    BackNotImplementedError,
    DeciderReturnedNothingError,
    InvalidStateError,
    MissingDeciderError,
    NoMatchingBranchError,
    NoTransitionError,
    StateMachineError,
    UninitializedStateError,
)

__all__ = [
    "BackNotImplementedError",
    "DeciderReturnedNothingError",
    "InvalidStateError",
    "MissingDeciderError",
    "NoMatchingBranchError",
    "NoTransitionError",
    "StateMachineError",
    "UninitializedStateError",
]
