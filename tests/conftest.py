"""Shared fixtures for enumerated-attribute tests."""

import os
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Any

import pytest
from enumerated_attribute import Configuration

SUPERHERO_SCHEMA = """\
fake_superhero:
  powers:
    - lying
    - flexing
    - none
"""

FAKE_USER_SCHEMA = """\
fake_user:
  gender: [female, male, other]
"""

FAKE_MEMBER_SCHEMA = """\
fake_member:
  plan: [free, pro]
"""

SHOP_SCHEMA = """\
shop:
  user:
    role: [member, admin]
"""


class RecordingEngine:
    """Enumeration engine that records every registration."""

    def __init__(self):
        self.calls: list[tuple[type, str, dict[str, Any]]] = []

    def register(self, owner: type, attribute_name: str, options: dict[str, Any]) -> None:
        self.calls.append((owner, attribute_name, options))

    def options_for(self, owner: type, attribute_name: str) -> dict[str, Any]:
        for call_owner, call_name, options in reversed(self.calls):
            if call_owner is owner and call_name == attribute_name:
                return options
        raise AssertionError(f"{owner.__qualname__}#{attribute_name} was not registered")


@pytest.fixture
def schema_dir():
    """Create a directory holding the schema file fixtures."""
    with TemporaryDirectory() as tmpdir:
        tmpdir_path = Path(tmpdir)
        (tmpdir_path / "enumerated_attributes.yml").write_text(SUPERHERO_SCHEMA)
        (tmpdir_path / "fake_user.yml").write_text(FAKE_USER_SCHEMA)
        (tmpdir_path / "fake_member.yml").write_text(FAKE_MEMBER_SCHEMA)
        (tmpdir_path / "shop.yml").write_text(SHOP_SCHEMA)
        (tmpdir_path / "empty.yml").write_text("")
        yield tmpdir_path


@pytest.fixture
def engine():
    """Create a recording enumeration engine."""
    return RecordingEngine()


@pytest.fixture
def config(schema_dir):
    """Create a configuration using the superhero schema as default."""
    return Configuration(schema_file=schema_dir / "enumerated_attributes.yml")


@pytest.fixture
def unreadable(monkeypatch):
    """Make selected paths look unreadable to the current process."""
    real_access = os.access
    paths: set[Path] = set()

    def fake_access(path, mode, *args, **kwargs):
        if Path(path) in paths and mode == os.R_OK:
            return False
        return real_access(path, mode, *args, **kwargs)

    monkeypatch.setattr(os, "access", fake_access)
    return paths
