import json
import pytest

from repo_launcher.core.config.settings import settings
from repo_launcher.core.storage.data.memory_store import InMemoryKeyValueStore
from repo_launcher.core.storage.data.repository import SqlKeyValueStore
from repo_launcher.features.repo_scanner.domain.models import Repo, RepoSet
from repo_launcher.features.scan_cache.service.cache import ScanCache

CONFIG = "~/code, ~/work"

@pytest.fixture
def repo_set():
    return RepoSet(
        repos=(
            Repo(name="app", path="/home/u/code/app", source_folder="/home/u/code",
                 workspace_file="/home/u/code/app/.app.code-workspace"),
            Repo(name="app", path="/home/u/work/app", source_folder="/home/u/work"),
        ),
        duplicate_names=frozenset({"app"}),
    )

def test_empty_slot_is_a_miss(memory_store):
    assert ScanCache(memory_store).load(CONFIG) is None

def test_stored_snapshot_is_returned_for_the_same_key(memory_store, repo_set):
    cache = ScanCache(memory_store)

    cache.store(CONFIG, repo_set)

    assert cache.load(CONFIG) == repo_set

@pytest.mark.parametrize("other_key", [CONFIG + " ", " " + CONFIG, "~/code,~/work", "~/work, ~/code", ""])
def test_any_textual_difference_in_key_is_a_miss(memory_store, repo_set, other_key):
    cache = ScanCache(memory_store)
    cache.store(CONFIG, repo_set)

    assert cache.load(other_key) is None

@pytest.mark.parametrize("payload", [
    "{not json",
    "null",
    "[]",
    "42",
    json.dumps({"config_key": CONFIG}),
    json.dumps({"config_key": 7, "data": {"repos": [], "duplicate_names": []}}),
    json.dumps({"config_key": CONFIG, "data": {"repos": "nope", "duplicate_names": []}}),
    json.dumps({"config_key": CONFIG, "data": {"repos": [{"name": "x"}], "duplicate_names": []}}),
    json.dumps({"config_key": CONFIG, "data": {"repos": ["x"], "duplicate_names": []}}),
])
def test_corrupt_payload_is_a_miss(payload):
    backend = InMemoryKeyValueStore({settings.SNAPSHOT_KEY: payload})

    assert ScanCache(backend).load(CONFIG) is None

def test_single_slot_is_overwritten_by_the_latest_store(memory_store, repo_set):
    cache = ScanCache(memory_store)
    cache.store(CONFIG, repo_set)

    newer = RepoSet()
    cache.store("~/other", newer)

    assert cache.load(CONFIG) is None
    assert cache.load("~/other") == newer
    assert list(memory_store.values) == [settings.SNAPSHOT_KEY]

def test_snapshot_survives_a_new_store_instance(session_factory, repo_set):
    """
    Written through SQLAlchemy, then read back by a fresh cache object.
    """
    ScanCache(SqlKeyValueStore(settings.CACHE_NAMESPACE, session_factory)).store(CONFIG, repo_set)

    reloaded = ScanCache(SqlKeyValueStore(settings.CACHE_NAMESPACE, session_factory))

    assert reloaded.load(CONFIG) == repo_set

def test_unreadable_database_is_a_miss(corrupt_session_factory):
    cache = ScanCache(SqlKeyValueStore(settings.CACHE_NAMESPACE, corrupt_session_factory))

    assert cache.load(CONFIG) is None

def test_failing_backend_read_is_a_miss(unavailable_store):
    assert ScanCache(unavailable_store()).load(CONFIG) is None
