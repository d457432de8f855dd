"""
Pytest configuration and shared fixtures for party tests.
"""

import os
from unittest.mock import MagicMock, Mock

import pytest

from party.model import Greeter, Visitor, VisitorLister

PARTY_TOML = """
[party]
just_nice = false
greeting = "Hi {name}"

[[party.nice]]
name = "Peter"
surname = "Parker"

[[party.not_nice]]
name = "Helo"
surname = "Parker"
"""


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test in an empty cwd with no PARTY_* variables set."""
    for key in list(os.environ):
        if key.startswith("PARTY_"):
            monkeypatch.delenv(key)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture
def peter() -> Visitor:
    return Visitor(name="Peter", surname="Parker")


@pytest.fixture
def helo() -> Visitor:
    return Visitor(name="Helo", surname="Parker")


@pytest.fixture
def mock_lister() -> MagicMock:
    """A VisitorLister mock; configure ``list_visitors.side_effect`` per test."""
    return MagicMock(spec=VisitorLister)


@pytest.fixture
def mock_greeter() -> MagicMock:
    return MagicMock(spec=Greeter)


@pytest.fixture
def manager(mock_lister: MagicMock, mock_greeter: MagicMock) -> Mock:
    """Parent mock recording lister and greeter calls in one ordered list."""
    parent = Mock()
    parent.attach_mock(mock_lister.list_visitors, "list_visitors")
    parent.attach_mock(mock_greeter.hello, "hello")
    return parent


@pytest.fixture
def party_toml(tmp_path):
    """Write a party.toml with one nice and one not-nice visitor; return its path."""
    conf_dir = tmp_path / "conf"
    conf_dir.mkdir()
    path = conf_dir / "party.toml"
    path.write_text(PARTY_TOML)
    return path
