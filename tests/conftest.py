"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from hexcodec.config import reset_settings


@pytest.fixture
def fresh_settings(monkeypatch, tmp_path):
    """Fixture isolating each test from cached settings and stray .env files."""
    monkeypatch.chdir(tmp_path)
    for name in ("HEXCODEC_LOG_LEVEL", "HEXCODEC_DEFAULT_MAX_MESSAGE_SIZE"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(scope="session")
def test_vectors():
    """Fixture providing known byte/hex pairs."""
    return [
        (b"", ""),
        (bytes([0x00, 0xFF, 0x1A]), "00FF1A"),
        (b"hello", "68656C6C6F"),
        (bytes([0, 1, 2, 255, 254, 253]), "000102FFFEFD"),
        (bytes([0x0F, 0xF0]), "0FF0"),
    ]
