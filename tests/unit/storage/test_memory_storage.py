from pathlib import Path

import pytest

from shelfsite.storage.exceptions import (
    DirectoryNotFoundError,
    StorageReadError,
    StorageUnavailableError,
    StorageWriteError,
)
from shelfsite.storage.memory import InMemoryStorageProvider
from shelfsite.storage.protocols import StorageProvider


def test_memory_provider_satisfies_protocol(memory_storage):
    assert isinstance(memory_storage, StorageProvider)


def test_scripted_selections_then_cancel(memory_storage):
    memory_storage.queue_selection(Path("/one"))
    memory_storage.queue_selection(None)

    assert memory_storage.pick_folder() == Path("/one")
    assert memory_storage.pick_folder() is None
    # Nothing scripted behaves like a cancel
    assert memory_storage.pick_folder() is None


def test_write_creates_parent_directories(memory_storage):
    memory_storage.write_file(Path("/site/books/good-reads/a.json"), b"{}")

    assert memory_storage.is_directory(Path("/site/books/good-reads"))
    assert memory_storage.file_exists(Path("/site/books"))
    assert memory_storage.list_directory(Path("/site/books")) == ["good-reads"]


def test_failing_write_leaves_existing_file(memory_storage):
    target = Path("/site/config.json")
    memory_storage.add_file(target, b"original")
    memory_storage.fail_writes_to(target)

    with pytest.raises(StorageWriteError):
        memory_storage.write_file(target, b"new")

    assert memory_storage.read_file(target) == b"original"


def test_unavailable_storage_raises_on_every_operation(memory_storage):
    memory_storage.available = False

    with pytest.raises(StorageUnavailableError):
        memory_storage.pick_folder()
    with pytest.raises(StorageUnavailableError):
        memory_storage.file_exists(Path("/x"))


def test_remove_directory_recursive_drops_descendants_only(memory_storage):
    memory_storage.add_file(Path("/site/dist/index.html"), b"x")
    memory_storage.add_file(Path("/site/dist/books/a/b.json"), b"x")
    memory_storage.add_file(Path("/site/distant.txt"), b"keep")

    memory_storage.remove_directory_recursive(Path("/site/dist"))

    assert not memory_storage.file_exists(Path("/site/dist"))
    assert memory_storage.read_file(Path("/site/distant.txt")) == b"keep"


def test_missing_entries_raise():
    storage = InMemoryStorageProvider()
    with pytest.raises(StorageReadError):
        storage.read_file(Path("/nope"))
    with pytest.raises(DirectoryNotFoundError):
        storage.list_directory(Path("/nope"))
