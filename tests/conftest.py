"""Configuração do pytest para o statekit."""

import logging
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from statekit.config.settings import get_machine_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    """Settings vêm do ambiente e são cacheados; cada teste começa limpo."""
    for var in (
        "STATEKIT_HISTORY_CAPACITY",
        "STATEKIT_LOG_LEVEL",
        "STATEKIT_SERVICE_NAME",
        "STATEKIT_LOG_TRANSITIONS",
    ):
        monkeypatch.delenv(var, raising=False)
    get_machine_settings.cache_clear()
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    get_machine_settings.cache_clear()
    root.handlers = handlers
    root.setLevel(level)
