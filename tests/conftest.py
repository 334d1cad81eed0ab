"""Shared fixtures for the diff backend tests."""

import pytest
from fastapi.testclient import TestClient

from models.diff import ChangeType
from services.config_manager import ConfigManager
from services.sequence_differ import SequenceDiffer


@pytest.fixture
def differ():
    """Differ without a time budget, so results are deterministic."""
    return SequenceDiffer(timeout=0)


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the config singleton at a throwaway directory."""
    monkeypatch.setenv("DIFFVIEW_CONFIG_DIR", str(tmp_path))
    ConfigManager.reset_instance()
    yield tmp_path
    ConfigManager.reset_instance()


@pytest.fixture
def client(config_dir):
    from main import app

    with TestClient(app) as test_client:
        yield test_client


def old_side(lines):
    """Text rebuilt from equal and deleted lines."""
    return "\n".join(l.content for l in lines if l.kind in (ChangeType.EQUAL, ChangeType.DELETE))


def new_side(lines):
    """Text rebuilt from equal and inserted lines."""
    return "\n".join(l.content for l in lines if l.kind in (ChangeType.EQUAL, ChangeType.INSERT))
