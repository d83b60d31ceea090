"""Calls to the Google Photos Library API."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from googleapiclient.errors import HttpError

from google_photos_frame.config import FrameConfig
from google_photos_frame.exceptions import ApiError
from google_photos_frame.models.album import AlbumResponse
from google_photos_frame.models.photos import MediaItemSearch
from google_photos_frame.utils.core import is_empty

logger = logging.getLogger(__name__)

# Search parameters only used by this client, never sent to or stored for the API
PAGING_PARAMETERS = ("pageToken", "pageSize")


@dataclass
class SearchResult:
    """Photos found by a search and the parameters that found them."""

    photos: List[Dict[str, Any]] = field(default_factory=list)
    parameters: Dict[str, Any] = field(default_factory=dict)


class LibraryApiClient:
    """Loads albums and media items through a photoslibrary v1 service."""

    def __init__(self, service: Any, config: Optional[FrameConfig] = None):
        self.service = service
        self.config = config or FrameConfig()

    def get_albums(self) -> List[Dict[str, Any]]:
        """List all albums owned by the user, skipping empty entries.

        Returns:
            Albums as JSON dicts

        Raises:
            ApiError: If a request fails
        """
        albums = []
        page_token = None

        while True:
            logger.debug("Loading albums. Received so far: %d", len(albums))
            request = self.service.albums().list(
                pageSize=self.config.album_page_size, pageToken=page_token
            )
            response = AlbumResponse(self._execute(request))

            if response.albums:
                logger.debug("Number of albums received: %d", len(response.albums))
                albums.extend(album for album in response.albums if not album.is_empty())

            page_token = response.next_page_token
            if not page_token:
                break

        logger.info("Albums loaded: %d", len(albums))
        return [album.to_json() for album in albums]

    def search(self, parameters: Dict[str, Any]) -> SearchResult:
        """Search the library until enough displayable media items are loaded.

        The optional photosToLoad parameter sets the minimum number of items
        to load; -1 loads everything. Because whole pages are loaded, more
        items than requested may be returned. Videos that failed or are still
        processing are left out.

        Args:
            parameters: mediaItems.search request body, e.g. {"albumId": ...}

        Returns:
            The photos as JSON dicts and the parameters without paging fields

        Raises:
            ApiError: If a request fails
        """
        photos_to_load = self._photos_to_load(parameters.get("photosToLoad"))
        body = {
            key: value
            for key, value in parameters.items()
            if key != "photosToLoad" and key not in PAGING_PARAMETERS
        }
        body["pageSize"] = self.config.search_page_size

        photos = []
        while True:
            logger.debug("Submitting search with parameters: %s", body)
            response = MediaItemSearch(self._execute(self.service.mediaItems().search(body=body)))

            # Pages may be sparse, and album searches cannot filter out unprocessed videos
            items = [
                item
                for item in response.media_items
                if not item.is_empty() and item.is_displayable()
            ]
            photos.extend(items)
            logger.debug("Found %d items in this request. Total items: %d", len(items), len(photos))

            if not response.next_page_token:
                break
            if 0 <= photos_to_load <= len(photos):
                break
            body["pageToken"] = response.next_page_token

        logger.info("Search complete: %d items", len(photos))

        stored_parameters = {
            key: value for key, value in parameters.items() if key not in PAGING_PARAMETERS
        }
        if "photosToLoad" in stored_parameters:
            stored_parameters["photosToLoad"] = photos_to_load

        return SearchResult(
            photos=[photo.to_json() for photo in photos], parameters=stored_parameters
        )

    def _photos_to_load(self, requested: Any) -> int:
        """Resolve the number of photos to load; missing or zero means the configured default."""
        if is_empty(requested, trim=True):
            return self.config.photos_to_load

        try:
            photos_to_load = int(requested)
        except (TypeError, ValueError) as e:
            raise ValueError(f"photosToLoad must be an integer, got {requested!r}") from e

        return photos_to_load or self.config.photos_to_load

    def _execute(self, request: Any) -> Dict[str, Any]:
        try:
            return request.execute()
        except HttpError as e:
            status = e.resp.status
            try:
                server_message = json.loads(e.content)
            except (TypeError, ValueError):
                server_message = None
            logger.error("Library API request failed (%s): %s", status, e)
            raise ApiError(
                f"Library API request failed with status {status}",
                status=status,
                server_message=server_message,
            ) from e
