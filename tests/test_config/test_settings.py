"""Testes para statekit.config.settings."""

from __future__ import annotations

from statekit.config.settings import (
    VALID_LOG_LEVELS,
    StateMachineSettings,
    get_machine_settings,
)


class TestStateMachineSettings:
    """Defaults, validação e carga do ambiente."""

    def test_defaults(self) -> None:
        settings = StateMachineSettings()
        assert settings.history_capacity == 10
        assert settings.log_level == "INFO"
        assert settings.service_name == "statekit"
        assert settings.log_transitions is True
        assert settings.validate() == []

    def test_validate_reports_each_problem(self) -> None:
        settings = StateMachineSettings(
            history_capacity=0,
            log_level="LOUD",
            service_name="",
        )
        errors = settings.validate()
        assert len(errors) == 3
        assert any("STATEKIT_HISTORY_CAPACITY" in e for e in errors)
        assert any("STATEKIT_LOG_LEVEL" in e for e in errors)
        assert any("STATEKIT_SERVICE_NAME" in e for e in errors)

    def test_valid_log_levels(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS

    def test_load_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("STATEKIT_HISTORY_CAPACITY", "25")
        monkeypatch.setenv("STATEKIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("STATEKIT_SERVICE_NAME", "orders")
        monkeypatch.setenv("STATEKIT_LOG_TRANSITIONS", "0")

        settings = get_machine_settings()

        assert settings.history_capacity == 25
        assert settings.log_level == "DEBUG"
        assert settings.service_name == "orders"
        assert settings.log_transitions is False

    def test_malformed_capacity_keeps_default(self, monkeypatch) -> None:
        monkeypatch.setenv("STATEKIT_HISTORY_CAPACITY", "ten")
        assert get_machine_settings().history_capacity == 10

    def test_settings_are_cached(self) -> None:
        assert get_machine_settings() is get_machine_settings()
