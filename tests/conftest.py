# File: tests/conftest.py

import os
import sys
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Import models so they are registered on Base
from repo_launcher.core.database.base import Base
import repo_launcher.core.storage.data.sql_models  # noqa: F401
from repo_launcher.core.storage.data.memory_store import InMemoryKeyValueStore
from repo_launcher.core.storage.domain.interfaces import IKeyValueStore


@pytest.fixture
def memory_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def test_engine(tmp_path):
    """
    A throwaway SQLite database per test.
    """
    engine = create_engine(f"sqlite:///{tmp_path / 'test_launcher.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """
    Points the home directory at a temp folder so "~" paths are predictable.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def make_repos():
    """
    Creates child directories under a source folder.
    Usage: make_repos(root, "api", "web")
    """
    def _make(root, *names):
        root.mkdir(parents=True, exist_ok=True)
        for name in names:
            (root / name).mkdir()
        return root
    return _make


@pytest.fixture
def corrupt_session_factory(tmp_path):
    """
    Sessions bound to a file that is not a SQLite database.
    Every query fails with sqlalchemy.exc.DatabaseError.
    """
    db_file = tmp_path / "corrupt.db"
    db_file.write_bytes(b"this is not a database" * 100)
    engine = create_engine(f"sqlite:///{db_file}")
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


class UnavailableStore(IKeyValueStore):
    """Key-value backend whose reads and/or writes fail like a broken disk."""

    def __init__(self, values=None, fail_reads=True, fail_writes=True):
        self.values = dict(values or {})
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    def get(self, key):
        if self.fail_reads:
            raise OSError("disk I/O error")
        return self.values.get(key)

    def set(self, key, value):
        if self.fail_writes:
            raise OSError("disk is read-only")
        self.values[key] = value


@pytest.fixture
def unavailable_store():
    """
    Factory for failing backends.
    Usage: unavailable_store(fail_writes=False) for a store that only fails reads.
    """
    return UnavailableStore
