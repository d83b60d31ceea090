"""Test configuration for pytest."""

from pathlib import Path
from typing import Any, Callable, Dict, Generator

import pytest

from google_photos_frame.cache.cache_manager import CacheManager
from google_photos_frame.config import FrameConfig


@pytest.fixture
def cache_db_path(tmp_path: Path) -> Path:
    """Path of a temporary cache database."""
    return tmp_path / "cache.db"


@pytest.fixture
def cache_manager(cache_db_path: Path) -> Generator[CacheManager, None, None]:
    """Create a cache manager without expiry."""
    manager = CacheManager(str(cache_db_path), "test_cache")
    yield manager
    manager.close()


@pytest.fixture
def frame_config(tmp_path: Path) -> FrameConfig:
    """Configuration pointing every file at a temporary directory."""
    return FrameConfig(
        photos_to_load=3,
        search_page_size=2,
        album_page_size=2,
        token_path=str(tmp_path / "token.json"),
        credentials_path=str(tmp_path / "client_secret.json"),
        cache_db_path=str(tmp_path / "cache.db"),
    )


@pytest.fixture
def album_payload() -> Dict[str, Any]:
    """Album resource as returned by albums.list."""
    return {
        "id": "album_1",
        "title": "Holidays",
        "productUrl": "https://photos.google.com/lr/album/album_1",
        "isWriteable": "true",
        "shareInfo": {
            "sharedAlbumOptions": {"isCollaborative": True, "isCommentable": "false"},
            "shareableUrl": "https://photos.app.goo.gl/abc",
            "shareToken": "token_1",
            "isJoined": True,
            "isOwned": True,
            "isJoinable": False,
        },
        "mediaItemsCount": "42",
        "coverPhotoBaseUrl": "https://lh3.googleusercontent.com/cover",
        "coverPhotoMediaItemId": "item_1",
    }


@pytest.fixture
def photo_payload() -> Dict[str, Any]:
    """Picture media item resource."""
    return {
        "id": "item_1",
        "description": "Beach",
        "productUrl": "https://photos.google.com/lr/photo/item_1",
        "baseUrl": "https://lh3.googleusercontent.com/item_1",
        "mimeType": "image/jpeg",
        "mediaMetadata": {
            "creationTime": "2024-01-01T00:00:00Z",
            "width": "1920",
            "height": "1080",
            "photo": {
                "cameraMake": "Canon",
                "cameraModel": "EOS 5D",
                "focalLength": 35,
                "apertureFNumber": 2.8,
                "isoEquivalent": 100,
                "exposureTime": "0.004s",
            },
        },
        "contributorInfo": {
            "profilePictureBaseUrl": "https://lh3.googleusercontent.com/profile",
            "displayName": "Jane",
        },
        "filename": "IMG_0001.jpg",
    }


def _video_payload(item_id: str, status: str) -> Dict[str, Any]:
    return {
        "id": item_id,
        "baseUrl": f"https://lh3.googleusercontent.com/{item_id}",
        "mimeType": "video/mp4",
        "mediaMetadata": {
            "creationTime": "2024-01-02T00:00:00Z",
            "width": "1280",
            "height": "720",
            "video": {"cameraMake": "Apple", "fps": 30, "status": status},
        },
        "filename": f"{item_id}.mp4",
    }


@pytest.fixture
def make_video() -> Callable[[str, str], Dict[str, Any]]:
    """Factory of video media item resources with a given processing status."""
    return _video_payload


@pytest.fixture
def video_payload() -> Dict[str, Any]:
    """Processed video media item resource."""
    return _video_payload("video_1", "READY")
