"""Pytest configuration and fixtures."""
import io
import pytest
from pathlib import Path
import tempfile
import yaml
from rich.console import Console

from activity_system.config import reset_config
from activity_system.validation.reader import StreamLineSource, TokenReader
from activity_system.validation.validator import InputValidator


@pytest.fixture
def temp_config_file():
    """Create a temporary config file for testing."""
    config_data = {
        'app': {
            'name': 'Test App',
            'version': '0.1.0',
            'debug': True
        },
        'logging': {
            'level': 'DEBUG',
            'format': 'text'
        },
        'ui': {
            'line_width': 30
        },
        'student': {
            'name': 'Test Student',
            'age': 19
        }
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        config_path = f.name

    yield config_path

    # Cleanup
    Path(config_path).unlink()


@pytest.fixture(autouse=True)
def clear_config():
    """Forget the global config before and after each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def console():
    """A plain-text console writing into memory."""
    return Console(file=io.StringIO(), width=100, color_system=None, force_terminal=False)


@pytest.fixture
def read_output(console):
    """Return everything written to the console so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def make_validator(console):
    """Build an InputValidator fed from a scripted input string."""

    def factory(text: str) -> InputValidator:
        source = StreamLineSource(console, io.StringIO(text))
        return InputValidator(TokenReader(source, console), console)

    return factory
