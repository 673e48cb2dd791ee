"""Formatter JSON para os logs do motor de resolução.

Cada transição, evento rejeitado ou falha de decider sai como uma linha
JSON. Os campos fixos identificam a instância da máquina; os campos de
domínio (state, event, from_state, to_state, decision, decider, action)
vêm do `extra` de cada chamada e entram no JSON sem configuração.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em toda linha, mesmo fora de uma StateMachine
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "instance_id",
        "service",
    }
)

# levelname/name ficam curtos no JSON
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter usado por configure_logging.

    Exemplo de output para um evento sem transição:
        {
            "asctime": "2026-10-19 10:30:00,000",
            "instance_id": "order-42",
            "level": "WARNING",
            "logger": "statekit.manager.machine",
            "message": "event_rejected",
            "service": "statekit",
            "state": "b_state",
            "event": "x_event"
        }
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
