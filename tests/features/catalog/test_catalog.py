import asyncio
import pytest

from repo_launcher.features.catalog.service.catalog import RepoCatalog
from repo_launcher.features.repo_scanner.domain.models import RepoSet
from repo_launcher.features.repo_scanner.service.scanner import RepoScanner
from repo_launcher.features.scan_cache.service.cache import ScanCache

# --- FAKES ---

class GatedScanner(RepoScanner):
    """
    Holds each scan until the test releases it, so completion order
    can be controlled.
    """
    def __init__(self):
        super().__init__()
        self.gates = {}

    def gate_for(self, folders):
        return self.gates.setdefault(tuple(folders), asyncio.Event())

    async def scan(self, source_folders):
        await self.gate_for(source_folders).wait()
        return await super().scan(source_folders)

# --- TESTS ---

@pytest.mark.asyncio
async def test_refresh_writes_through_to_cache(tmp_path, make_repos, memory_store):
    src = make_repos(tmp_path / "src", "api")
    cache = ScanCache(memory_store)
    catalog = RepoCatalog(cache)

    assert catalog.initial(str(src)) is None

    data = await catalog.refresh(str(src))

    assert [r.name for r in data.repos] == ["api"]
    assert catalog.current == data
    assert cache.load(str(src)) == data

@pytest.mark.asyncio
async def test_initial_serves_snapshot_before_scanning(tmp_path, make_repos, memory_store):
    src = make_repos(tmp_path / "src", "api")
    cache = ScanCache(memory_store)
    first_run = await RepoCatalog(cache).refresh(str(src))

    # New repo appears; a fresh process still renders the snapshot instantly
    (src / "web").mkdir()
    catalog = RepoCatalog(cache)

    assert catalog.initial(str(src)) == first_run
    assert catalog.current == first_run

    refreshed = await catalog.refresh(str(src))
    assert [r.name for r in refreshed.repos] == ["api", "web"]
    assert catalog.current == refreshed

@pytest.mark.asyncio
async def test_changed_setting_ignores_old_snapshot(tmp_path, make_repos, memory_store):
    src = make_repos(tmp_path / "src", "api")
    cache = ScanCache(memory_store)
    await RepoCatalog(cache).refresh(str(src))

    catalog = RepoCatalog(cache)

    assert catalog.initial(f"{src} ") is None
    assert catalog.current is None

@pytest.mark.asyncio
async def test_superseded_scan_is_discarded(tmp_path, make_repos, memory_store):
    """
    Scan for setting A is still running when the setting changes to B.
    A finishes last, but its result is neither shown nor cached.
    """
    # 1. Arrange
    old = make_repos(tmp_path / "old", "legacy")
    new = make_repos(tmp_path / "new", "fresh")
    scanner = GatedScanner()
    cache = ScanCache(memory_store)
    catalog = RepoCatalog(cache, scanner)

    # 2. Act: start A, then B; let B finish first
    task_a = asyncio.create_task(catalog.refresh(str(old)))
    await asyncio.sleep(0)
    task_b = asyncio.create_task(catalog.refresh(str(new)))
    await asyncio.sleep(0)

    scanner.gate_for([str(new)]).set()
    result_b = await task_b
    scanner.gate_for([str(old)]).set()
    result_a = await task_a

    # 3. Assert
    assert result_a is None
    assert [r.name for r in result_b.repos] == ["fresh"]
    assert catalog.current == result_b
    assert catalog.current_key == str(new)
    assert cache.load(str(new)) == result_b
    assert cache.load(str(old)) is None

@pytest.mark.asyncio
async def test_empty_configuration_still_publishes_empty_set(memory_store):
    catalog = RepoCatalog(ScanCache(memory_store))

    data = await catalog.refresh("")

    assert data == RepoSet()
    assert catalog.current == RepoSet()

@pytest.mark.asyncio
async def test_failed_snapshot_write_still_returns_fresh_scan(tmp_path, make_repos, unavailable_store):
    src = make_repos(tmp_path / "src", "api")
    catalog = RepoCatalog(ScanCache(unavailable_store(fail_reads=False)))

    data = await catalog.refresh(str(src))

    assert [r.name for r in data.repos] == ["api"]
    assert catalog.current == data
