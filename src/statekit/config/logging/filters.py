"""Filters de logging para injeção de contexto.

Campos injetados:
- instance_id: instância da máquina que gerou o log
- service: nome do serviço
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class MachineContextFilter(logging.Filter):
    """Injeta instance_id e service em cada record de log.

    O motor de resolução passa instance_id via `extra`; quando ausente,
    usa o getter (ex: ContextVar do chamador) ou string vazia.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        instance_id_getter: Função que retorna o instance_id atual.
    """

    def __init__(
        self,
        service_name: str,
        instance_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_instance_id = instance_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona instance_id e service ao record.

        Returns:
            True sempre (não filtra, apenas enriquece).
        """
        existing = getattr(record, "instance_id", None)
        record.instance_id = existing if existing else self._get_instance_id()
        record.service = self._service_name
        return True
