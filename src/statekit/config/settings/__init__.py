"""Agregador de settings do statekit."""

from __future__ import annotations

from statekit.config.settings.machine import (
    VALID_LOG_LEVELS,
    StateMachineSettings,
    get_machine_settings,
)

__all__ = [
    "VALID_LOG_LEVELS",
    "StateMachineSettings",
    "get_machine_settings",
]
