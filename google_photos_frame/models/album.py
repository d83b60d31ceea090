"""Album models of the Google Photos Library API.

See https://developers.google.com/photos/library/reference/rest/v1/albums
"""

from google_photos_frame.models.core import ListOf, Model, Nested, Scalar
from google_photos_frame.models.transformers import boolean_transformer


class SharedAlbumOptions(Model):
    """Options controlling what collaborators can do in a shared album."""

    fields = (
        Scalar("is_collaborative", "isCollaborative", False, boolean_transformer()),
        Scalar("is_commentable", "isCommentable", False, boolean_transformer()),
    )


class ShareInfo(Model):
    """Sharing information of an album."""

    fields = (
        Nested("shared_album_options", SharedAlbumOptions, "sharedAlbumOptions"),
        Scalar("shareable_url", "shareableUrl"),
        Scalar("share_token", "shareToken"),
        Scalar("is_joined", "isJoined", False, boolean_transformer()),
        Scalar("is_owned", "isOwned", False, boolean_transformer()),
        Scalar("is_joinable", "isJoinable", False, boolean_transformer()),
    )


class Album(Model):
    """Album owned by or shared with the user."""

    fields = (
        Scalar("id"),
        Scalar("title"),
        Scalar("product_url", "productUrl"),
        Scalar("is_writeable", "isWriteable", False, boolean_transformer()),
        Nested("share_info", ShareInfo, "shareInfo"),
        Scalar("media_items_count", "mediaItemsCount"),
        Scalar("cover_photo_base_url", "coverPhotoBaseUrl"),
        Scalar("cover_photo_media_item_id", "coverPhotoMediaItemId"),
    )


class AlbumResponse(Model):
    """One page of the albums.list response."""

    fields = (
        ListOf("albums", Album),
        Scalar("next_page_token", "nextPageToken"),
    )
