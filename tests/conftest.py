"""
Shared pytest fixtures and utilities for the cryptify test suite.
"""

from pathlib import Path
from typing import Dict, Any, Callable

import pytest
import yaml


@pytest.fixture
def all_byte_values() -> bytes:
    """Every byte value 0x00-0xFF once, in order."""
    return bytes(range(256))


@pytest.fixture
def sample_file(tmp_path: Path, all_byte_values: bytes) -> Path:
    """
    Small binary file holding every byte value followed by some text.
    """
    path = tmp_path / "sample.bin"
    path.write_bytes(all_byte_values + b"The quick brown fox\n")
    return path


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    """
    Write a cryptify.yaml into the temp directory.

    Usage:
        path = make_config({"output": {"overwrite": True}})
    """

    def _builder(contents: Dict[str, Any] | None = None) -> Path:
        path = tmp_path / "cryptify.yaml"
        path.write_text(yaml.safe_dump(contents or {}))
        return path

    return _builder
