"""Main module for Google Photos Frame."""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from tabulate import tabulate

from google_photos_frame.cache.cache_manager import CacheManager
from google_photos_frame.config import FrameConfig
from google_photos_frame.exceptions import ApiError, GooglePhotosError
from google_photos_frame.library_api import LibraryApiClient, SearchResult
from google_photos_frame.utils.auth import authenticate_google_photos, remove_credentials
from google_photos_frame.utils.core import is_empty

logger = logging.getLogger(__name__)


class PhotoFrame:
    """Loads albums and the photo queue shown on the frame, caching them per user.

    The queue is remembered as the search that produced it: once the cached
    media items expire, the search is resubmitted so the frame picks up new
    photos added to the album.
    """

    def __init__(self, config: Optional[FrameConfig] = None):
        """Initialize the frame."""
        self.config = config or FrameConfig()
        self.library: Optional[LibraryApiClient] = None
        self.album_cache = CacheManager(
            self.config.cache_db_path, "albums", ttl=self.config.album_cache_ttl
        )
        self.media_item_cache = CacheManager(
            self.config.cache_db_path, "media_items", ttl=self.config.media_item_cache_ttl
        )
        self.storage = CacheManager(self.config.cache_db_path, "storage")

    def authenticate(self) -> None:
        """Authenticate with Google Photos API."""
        service = authenticate_google_photos(
            self.config.token_path,
            self.config.credentials_path,
            self.config.scopes,
            self.config.api_endpoint,
        )
        self.library = LibraryApiClient(service, self.config)

    def _library(self) -> LibraryApiClient:
        if self.library is None:
            self.authenticate()
        return self.library

    def get_albums(self, user_id: str) -> Dict[str, Any]:
        """Get the albums of the user, from cache when available.

        Raises:
            ApiError: If the albums could not be loaded
        """
        cached_albums = self.album_cache.get_item(user_id)
        if cached_albums:
            logger.debug("Loaded albums from cache.")
            return cached_albums

        logger.debug("Loading albums from API.")
        try:
            albums = self._library().get_albums()
        except ApiError:
            self.album_cache.remove_item(user_id)
            raise

        data = {"albums": albums}
        self.album_cache.set_item(user_id, data)
        return data

    def load_from_album(
        self, user_id: str, album_id: str, photos_to_load: Optional[int] = None
    ) -> Dict[str, Any]:
        """Load the media items of an album into the frame queue.

        Args:
            user_id: User to load the queue for
            album_id: Album to search
            photos_to_load: Minimum number of items to load, -1 for all

        Returns:
            Dict with the loaded photos and the search parameters
        """
        logger.info("Importing album: %s", album_id)
        parameters: Dict[str, Any] = {"albumId": album_id}
        if photos_to_load:
            parameters["photosToLoad"] = photos_to_load

        result = self._library().search(parameters)
        return self._store_queue(user_id, result)

    def get_queue(self, user_id: str) -> Dict[str, Any]:
        """Get the photos queued for the frame.

        Returns:
            Dict with photos and parameters, or an empty dict if nothing was
            ever loaded for the user
        """
        cached_photos = self.media_item_cache.get_item(user_id)
        stored = self.storage.get_item(user_id) or {}

        if not is_empty(cached_photos):
            logger.debug("Returning cached photos.")
            return {"photos": cached_photos, "parameters": stored.get("parameters")}

        if stored.get("parameters"):
            logger.debug("Resubmitting filter search %s", stored["parameters"])
            result = self._library().search(stored["parameters"])
            return self._store_queue(user_id, result)

        logger.debug("No cached data.")
        return {}

    def _store_queue(self, user_id: str, result: SearchResult) -> Dict[str, Any]:
        self.media_item_cache.set_item(user_id, result.photos)
        self.storage.set_item(user_id, {"parameters": result.parameters})
        return {"photos": result.photos, "parameters": result.parameters}

    def logout(self, user_id: str) -> None:
        """Forget everything cached for the user and the saved credentials."""
        for cache in (self.album_cache, self.media_item_cache, self.storage):
            cache.remove_item(user_id)
        remove_credentials(self.config.token_path)
        self.library = None


def print_albums(albums: List[Dict[str, Any]]) -> None:
    """Print albums as a table."""
    rows = [
        [album.get("title", ""), album.get("mediaItemsCount", ""), album.get("id", "")]
        for album in albums
    ]
    if rows:
        print(tabulate(rows, headers=["Title", "Media Items", "ID"], tablefmt="psql"))
    print(f"\nTotal albums: {len(rows)}")


def print_photos(photos: List[Dict[str, Any]]) -> None:
    """Print media items as a table."""
    rows = []
    for photo in photos:
        metadata = photo.get("mediaMetadata") or {}
        width = metadata.get("width")
        height = metadata.get("height")
        rows.append(
            [
                photo.get("filename", ""),
                photo.get("mediaType", ""),
                photo.get("mimeType", ""),
                metadata.get("creationTime", ""),
                f"{width}x{height}" if width and height else "",
            ]
        )

    if rows:
        print(
            tabulate(
                rows,
                headers=["Filename", "Type", "MIME Type", "Creation Time", "Dimensions"],
                tablefmt="psql",
            )
        )
    print(f"\nTotal media items: {len(rows)}")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Google Photos Frame")

    # Global arguments
    parser.add_argument("--user-id", default="default", help="User to cache results for")
    parser.add_argument("--cache-db", type=str, help="Path of the cache database")
    parser.add_argument("--token", type=str, help="Path of the saved OAuth token")
    parser.add_argument("--credentials", type=str, help="Path of the OAuth client secrets")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands", required=True)

    subparsers.add_parser("albums", help="List albums")

    load_album_parser = subparsers.add_parser("load-album", help="Load an album into the frame")
    load_album_parser.add_argument("album_id", type=str, help="ID of the album to load")
    load_album_parser.add_argument(
        "--photos-to-load", type=int, help="Minimum number of photos to load, -1 for all"
    )

    subparsers.add_parser("queue", help="Show the photos queued for the frame")

    subparsers.add_parser("logout", help="Forget cached data and saved credentials")

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> FrameConfig:
    """Build the configuration from the environment and command line overrides."""
    config = FrameConfig()
    if args.cache_db:
        config.cache_db_path = args.cache_db
    if args.token:
        config.token_path = args.token
    if args.credentials:
        config.credentials_path = args.credentials
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the Google Photos Frame CLI."""
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        frame = PhotoFrame(build_config(args))

        if args.command == "albums":
            data = frame.get_albums(args.user_id)
            if args.json:
                print(json.dumps(data, indent=2))
            else:
                print_albums(data.get("albums", []))

        elif args.command == "load-album":
            data = frame.load_from_album(args.user_id, args.album_id, args.photos_to_load)
            if args.json:
                print(json.dumps(data, indent=2))
            else:
                print_photos(data["photos"])

        elif args.command == "queue":
            data = frame.get_queue(args.user_id)
            if args.json:
                print(json.dumps(data, indent=2))
            elif not data:
                print("No photos loaded yet. Use load-album first.")
            else:
                print_photos(data["photos"])

        elif args.command == "logout":
            frame.logout(args.user_id)
            print("Logged out")

    except (GooglePhotosError, ValidationError) as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
