"""Shared test fixtures."""
import io
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `claro.*` and `main` imports work
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from claro.core.interpreter import Interpreter
from claro.core.settings_manager import SettingsManager


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def err():
    return io.StringIO()


@pytest.fixture
def interp(out, err):
    """Interpreter with default settings and in-memory streams."""
    return Interpreter(SettingsManager(), out=out, err=err)


@pytest.fixture
def write_ini(tmp_path):
    """Write an INI file and return a SettingsManager for it."""
    def _write(text: str) -> SettingsManager:
        path = tmp_path / "claro.ini"
        path.write_text(text, encoding="utf-8")
        return SettingsManager(path)
    return _write
