"""Media item models of the Google Photos Library API.

See https://developers.google.com/photos/library/reference/rest/v1/mediaItems
"""

from enum import Enum
from typing import Optional

from google_photos_frame.models.core import Derived, ListOf, Model, Nested, Scalar


class VideoProcessingStatus(str, Enum):
    """Processing status of a video uploaded to Google Photos."""

    UNSPECIFIED = "UNSPECIFIED"
    PROCESSING = "PROCESSING"
    READY = "READY"
    FAILED = "FAILED"


class MediaType(str, Enum):
    """Kind of media, derived from the MIME type."""

    VIDEO = "video"
    PICTURE = "image"


class Photo(Model):
    """Camera metadata of a photo."""

    fields = (
        Scalar("camera_make", "cameraMake"),
        Scalar("camera_model", "cameraModel"),
        Scalar("focal_length", "focalLength"),
        Scalar("aperture_f_number", "apertureFNumber"),
        Scalar("iso_equivalent", "isoEquivalent"),
        Scalar("exposure_time", "exposureTime"),
    )


class Video(Model):
    """Camera metadata and processing status of a video."""

    fields = (
        Scalar("camera_make", "cameraMake"),
        Scalar("camera_model", "cameraModel"),
        Scalar("fps"),
        Scalar("status"),
    )


class MediaMetadata(Model):
    """Metadata of a media item."""

    fields = (
        Scalar("creation_time", "creationTime"),
        Scalar("width"),
        Scalar("height"),
        Nested("photo", Photo),
        Nested("video", Video),
    )

    def _video_status(self) -> Optional[str]:
        return self.video.status if self.video is not None else None

    def has_failed_processing(self) -> bool:
        """Check if the video of this item failed processing."""
        return self._video_status() == VideoProcessingStatus.FAILED

    def is_processing(self) -> bool:
        """Check if the video of this item is still being processed."""
        return self._video_status() == VideoProcessingStatus.PROCESSING


class ContributorInfo(Model):
    """User who added a media item to a shared album."""

    fields = (
        Scalar("profile_picture_base_url", "profilePictureBaseUrl"),
        Scalar("display_name", "displayName"),
    )


def _media_type(item: "MediaItem") -> MediaType:
    if isinstance(item.mime_type, str) and item.mime_type.startswith(MediaType.VIDEO.value):
        return MediaType.VIDEO
    return MediaType.PICTURE


class MediaItem(Model):
    """Photo or video stored in Google Photos."""

    fields = (
        Scalar("id"),
        Scalar("description"),
        Scalar("product_url", "productUrl"),
        Scalar("base_url", "baseUrl"),
        Scalar("mime_type", "mimeType"),
        Nested("media_metadata", MediaMetadata, "mediaMetadata"),
        Nested("contributor_info", ContributorInfo, "contributorInfo"),
        Scalar("filename"),
        Derived("media_type", _media_type, "mediaType"),
    )

    def is_picture(self) -> bool:
        return self.media_type == MediaType.PICTURE

    def is_video(self) -> bool:
        return self.media_type == MediaType.VIDEO

    def has_failed_processing(self) -> Optional[bool]:
        """Check if the video failed processing; None for pictures."""
        if not self.is_video():
            return None
        if self.media_metadata is None:
            return False
        return self.media_metadata.has_failed_processing()

    def is_processing(self) -> Optional[bool]:
        """Check if the video is still being processed; None for pictures."""
        if not self.is_video():
            return None
        if self.media_metadata is None:
            return False
        return self.media_metadata.is_processing()

    def is_displayable(self) -> bool:
        """Check if the item can be shown in the frame.

        Pictures always can; videos only once processed successfully.
        """
        return not self.is_video() or not (self.has_failed_processing() or self.is_processing())


class MediaItemSearch(Model):
    """One page of the mediaItems.search response."""

    fields = (
        ListOf("media_items", MediaItem, "mediaItems"),
        Scalar("next_page_token", "nextPageToken"),
    )
