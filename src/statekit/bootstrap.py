"""Bootstrap do statekit: logging a partir dos settings.

Uso:
    from statekit.bootstrap import initialize_logging

    # Na inicialização da aplicação
    initialize_logging()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from statekit.config.logging import configure_logging
from statekit.config.settings import StateMachineSettings, get_machine_settings

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def initialize_logging(
    settings: StateMachineSettings | None = None,
    instance_id_getter: Callable[[], str] | None = None,
) -> StateMachineSettings:
    """Valida settings e configura logging estruturado.

    Args:
        settings: Settings explícitos (usa os de ambiente se None).
        instance_id_getter: Getter opcional de instance_id do contexto.

    Returns:
        Settings efetivamente aplicados.

    Raises:
        ValueError: Se os settings forem inválidos.
    """
    settings = settings or get_machine_settings()
    errors = settings.validate()
    if errors:
        raise ValueError(f"Configuração inválida: {'; '.join(errors)}")

    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        instance_id_getter=instance_id_getter,
    )
    logger.info(
        "logging_initialized",
        extra={
            "log_level": settings.log_level,
            "history_capacity": settings.history_capacity,
        },
    )
    return settings
