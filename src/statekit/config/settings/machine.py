"""Settings do statekit.

Configurações lidas de variáveis de ambiente (prefixo STATEKIT_).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from statekit.history.bounded import DEFAULT_HISTORY_CAPACITY

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class StateMachineSettings:
    """Configurações das máquinas de estado.

    Attributes:
        history_capacity: Capacidade padrão do histórico de eventos
        log_level: Nível de log (DEBUG|INFO|WARNING|ERROR|CRITICAL)
        service_name: Nome do serviço nos logs
        log_transitions: Emite log debug a cada transição concluída
    """

    history_capacity: int = DEFAULT_HISTORY_CAPACITY
    log_level: str = "INFO"
    service_name: str = "statekit"
    log_transitions: bool = True

    def validate(self) -> list[str]:
        """Valida configurações.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.history_capacity < 1:
            errors.append("STATEKIT_HISTORY_CAPACITY deve ser >= 1")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"STATEKIT_LOG_LEVEL inválido: {self.log_level}")

        if not self.service_name:
            errors.append("STATEKIT_SERVICE_NAME não pode ser vazio")

        return errors


def _parse_int(raw: str, default: int) -> int:
    """Converte inteiro de env; valor malformado mantém o padrão."""
    try:
        return int(raw)
    except ValueError:
        return default


def _load_machine_from_env() -> StateMachineSettings:
    """Carrega StateMachineSettings de variáveis de ambiente."""
    return StateMachineSettings(
        history_capacity=_parse_int(
            os.getenv("STATEKIT_HISTORY_CAPACITY", str(DEFAULT_HISTORY_CAPACITY)),
            DEFAULT_HISTORY_CAPACITY,
        ),
        log_level=os.getenv("STATEKIT_LOG_LEVEL", "INFO").upper(),
        service_name=os.getenv("STATEKIT_SERVICE_NAME", "statekit"),
        log_transitions=os.getenv("STATEKIT_LOG_TRANSITIONS", "true").lower()
        in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_machine_settings() -> StateMachineSettings:
    """Retorna instância cacheada de StateMachineSettings."""
    return _load_machine_from_env()
