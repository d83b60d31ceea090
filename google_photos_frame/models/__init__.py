"""Models for Google Photos Frame."""

from google_photos_frame.exceptions import (
    ApiError,
    AuthenticationError,
    CacheError,
    GooglePhotosError,
    MalformedInputError,
)
from google_photos_frame.models.album import Album, AlbumResponse, SharedAlbumOptions, ShareInfo
from google_photos_frame.models.core import (
    Derived,
    ListOf,
    Model,
    Nested,
    Scalar,
    convert_to_json,
    get_json_object,
    init_field,
    is_model_empty,
)
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

__all__ = [
    "Album",
    "AlbumResponse",
    "ApiError",
    "AuthenticationError",
    "CacheError",
    "ContributorInfo",
    "Derived",
    "GooglePhotosError",
    "ListOf",
    "MalformedInputError",
    "MediaItem",
    "MediaItemSearch",
    "MediaMetadata",
    "MediaType",
    "Model",
    "Nested",
    "Photo",
    "Scalar",
    "SharedAlbumOptions",
    "ShareInfo",
    "Video",
    "VideoProcessingStatus",
    "convert_to_json",
    "get_json_object",
    "init_field",
    "is_model_empty",
]
