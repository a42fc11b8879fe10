"""
TTS Reader Test Configuration
=============================

Shared fixtures and markers for pytest.
"""

import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "requires_openai: test needs the openai and simpleaudio packages")


@pytest.fixture
def reader_dir(tmp_path):
    """Temporary directory standing in for the reader's install folder."""
    d = tmp_path / "reader"
    d.mkdir()
    return d


@pytest.fixture
def reader_paths(reader_dir):
    """Input, settings and output paths inside reader_dir (none created yet)."""
    return {
        "input": str(reader_dir / "TTSInput.txt"),
        "settings": str(reader_dir / "TTSSettings.txt"),
        "output": str(reader_dir / "TTSOutput.wav"),
    }
