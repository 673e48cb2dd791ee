"""Configuração de logging estruturado.

Uso:
    from statekit.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="orders")
    logger = get_logger(__name__)

Campos obrigatórios em todo log:
- instance_id
- service
- level
- logger
- message
- asctime
"""

from statekit.config.logging.config import (
    configure_logging,
    get_logger,
    log_action_failure,
)
from statekit.config.logging.filters import MachineContextFilter
from statekit.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "MachineContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_action_failure",
]
