"""Configuração centralizada de logging.

Uso:
    from statekit.config.logging import configure_logging, get_logger

    # Na inicialização da aplicação que usa o statekit
    configure_logging(level="DEBUG", service_name="orders")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("order_created", extra={"instance_id": "order-42"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from statekit.config.logging.filters import MachineContextFilter
from statekit.config.logging.formatters import create_json_formatter
from statekit.config.settings.machine import VALID_LOG_LEVELS

if TYPE_CHECKING:
    from collections.abc import Callable

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "statekit"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    instance_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        instance_id_getter: Função opcional que retorna o instance_id
            do contexto atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(MachineContextFilter(service_name, instance_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_action_failure(
    logger: logging.Logger,
    action: str,
    *,
    state: str,
    event: str,
    instance_id: str = "",
    error: BaseException | None = None,
) -> None:
    """Log observável de falha dentro de uma ação.

    A exceção continua propagando; este log apenas registra o contexto
    (estado e evento) que o traceback não carrega.

    Args:
        logger: Logger instance.
        action: Descrição da ação (ex: "method:on_stop").
        state: Estado atual quando a ação falhou.
        event: Evento em processamento.
        instance_id: Instância da máquina.
        error: Exceção levantada pela ação.
    """
    extra: dict[str, Any] = {
        "action": action,
        "state": state,
        "event": event,
        "instance_id": instance_id,
    }
    if error is not None:
        extra["error_type"] = type(error).__name__

    logger.warning(
        "Action failed for %s",
        action,
        extra=extra,
    )
