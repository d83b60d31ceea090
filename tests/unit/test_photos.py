"""Unit tests for media item models."""

import pytest

from google_photos_frame.models.photos import (
    ContributorInfo,
    MediaItem,
    MediaItemSearch,
    MediaMetadata,
    MediaType,
    Photo,
    Video,
    VideoProcessingStatus,
)


def test_media_item_from_payload(photo_payload):
    """Test a picture payload is mapped onto nested models."""
    item = MediaItem(photo_payload)

    assert item.id == "item_1"
    assert item.mime_type == "image/jpeg"
    assert item.filename == "IMG_0001.jpg"
    assert isinstance(item.media_metadata, MediaMetadata)
    assert isinstance(item.media_metadata.photo, Photo)
    assert item.media_metadata.photo.camera_make == "Canon"
    assert item.media_metadata.photo.aperture_f_number == 2.8
    assert item.media_metadata.video is None
    assert isinstance(item.contributor_info, ContributorInfo)
    assert item.contributor_info.display_name == "Jane"
    assert item.media_metadata.parent is item
    assert item.media_metadata._name == "mediaMetadata"


def test_media_item_round_trip(photo_payload):
    """Test serializing reproduces the payload plus the derived media type."""
    expected = dict(photo_payload, mediaType="image")

    assert MediaItem(photo_payload).to_json() == expected


def test_picture_flags(photo_payload):
    """Test pictures report None for video processing checks."""
    item = MediaItem(photo_payload)

    assert item.media_type == MediaType.PICTURE
    assert item.is_picture() is True
    assert item.is_video() is False
    assert item.has_failed_processing() is None
    assert item.is_processing() is None
    assert item.is_displayable() is True


@pytest.mark.parametrize(
    "status, failed, processing, displayable",
    [
        ("READY", False, False, True),
        ("UNSPECIFIED", False, False, True),
        ("PROCESSING", False, True, False),
        ("FAILED", True, False, False),
    ],
)
def test_video_flags(make_video, status, failed, processing, displayable):
    """Test videos delegate processing checks to their metadata."""
    item = MediaItem(make_video("video_1", status))

    assert item.media_type == MediaType.VIDEO
    assert item.is_video() is True
    assert item.is_picture() is False
    assert item.has_failed_processing() is failed
    assert item.is_processing() is processing
    assert item.is_displayable() is displayable


def test_video_without_metadata():
    """Test a video without metadata is not considered failed or processing."""
    item = MediaItem({"id": "v", "mimeType": "video/quicktime"})

    assert item.has_failed_processing() is False
    assert item.is_processing() is False


def test_video_status_enum_matches_strings():
    """Test processing status comparisons use the raw API strings."""
    video = Video({"status": "FAILED"})

    assert video.status == VideoProcessingStatus.FAILED
    assert MediaMetadata({"video": {"status": "FAILED"}}).has_failed_processing() is True
    assert MediaMetadata({"video": {"status": "failed"}}).has_failed_processing() is False
    assert MediaMetadata({"width": "10"}).is_processing() is False


def test_media_item_defaults():
    """Test a media item without MIME type is treated as a picture."""
    item = MediaItem({})

    assert item.id is None
    assert item.media_metadata is None
    assert item.media_type == MediaType.PICTURE
    assert item.is_empty() is True
    assert item.to_json() == {"mediaType": "image"}
    assert "media_type" not in item.keys


def test_video_serializes_media_type(video_payload):
    """Test the derived media type is written under its external name."""
    data = MediaItem(video_payload).to_json()

    assert data["mediaType"] == "video"
    assert data["mediaMetadata"]["video"] == {"cameraMake": "Apple", "fps": 30, "status": "READY"}


def test_media_item_search(photo_payload, video_payload):
    """Test search pages keep items in order and drop empty entries."""
    search = MediaItemSearch(
        {"mediaItems": [photo_payload, None, {}, video_payload], "nextPageToken": "page_2"}
    )

    assert [item.id for item in search.media_items] == ["item_1", "video_1"]
    assert search.next_page_token == "page_2"
    assert search.is_empty() is False

    data = search.to_json()
    assert [item["id"] for item in data["mediaItems"]] == ["item_1", "video_1"]
    assert data["nextPageToken"] == "page_2"


def test_media_item_search_empty():
    """Test a search without results is empty."""
    search = MediaItemSearch({})

    assert search.media_items == []
    assert search.is_empty() is True
