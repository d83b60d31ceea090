"""Unit tests for the temporary cache."""

import sqlite3

import pytest

from google_photos_frame.cache.cache_manager import CacheManager
from google_photos_frame.exceptions import CacheError


def test_set_and_get_item(cache_manager):
    """Test JSON values are stored and read back."""
    value = {"albums": [{"id": "1", "title": "T", "isWriteable": True}]}
    cache_manager.set_item("user", value)

    assert cache_manager.get_item("user") == value
    assert cache_manager.get_item("other") is None


def test_set_item_replaces_value(cache_manager):
    """Test storing a key twice keeps the latest value."""
    cache_manager.set_item("user", [1])
    cache_manager.set_item("user", [2])

    assert cache_manager.get_item("user") == [2]


def test_remove_item_and_clear(cache_manager):
    """Test items can be removed one by one or all at once."""
    cache_manager.set_item("a", 1)
    cache_manager.set_item("b", 2)

    cache_manager.remove_item("a")
    assert cache_manager.get_item("a") is None
    assert cache_manager.get_item("b") == 2

    cache_manager.clear()
    assert cache_manager.get_item("b") is None


def test_items_expire(cache_db_path, mocker):
    """Test items are dropped once their TTL has passed."""
    mock_time = mocker.patch("google_photos_frame.cache.cache_manager.time")
    mock_time.time.return_value = 1000.0
    cache = CacheManager(str(cache_db_path), "short", ttl=60)

    cache.set_item("user", "value")
    mock_time.time.return_value = 1059.0
    assert cache.get_item("user") == "value"

    mock_time.time.return_value = 1060.0
    assert cache.get_item("user") is None

    # Expired rows are deleted, not just hidden
    mock_time.time.return_value = 0.0
    assert cache.get_item("user") is None
    cache.close()


def test_caches_share_database(cache_db_path):
    """Test named caches in one file do not see each other's items."""
    albums = CacheManager(str(cache_db_path), "albums")
    storage = CacheManager(str(cache_db_path), "storage")

    albums.set_item("user", "albums")
    storage.set_item("user", "storage")

    assert albums.get_item("user") == "albums"
    assert storage.get_item("user") == "storage"
    albums.close()
    storage.close()


def test_invalid_cache_name(cache_db_path):
    """Test cache names must be usable as table names."""
    with pytest.raises(ValueError):
        CacheManager(str(cache_db_path), "albums; DROP TABLE x")


def test_connect_failure(tmp_path):
    """Test database failures are reported as cache errors."""
    cache = CacheManager(str(tmp_path / "missing" / "cache.db"), "albums")

    with pytest.raises(CacheError):
        cache.get_item("user")


def test_write_failure(cache_manager, mocker):
    """Test SQLite errors while writing are wrapped."""
    cache_manager.connect()
    cache_manager.cursor = mocker.Mock()
    cache_manager.cursor.execute.side_effect = sqlite3.OperationalError("disk I/O error")

    with pytest.raises(CacheError):
        cache_manager.set_item("user", 1)
