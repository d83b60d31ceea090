"""Configuration for Google Photos Frame."""

from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# If modifying these scopes, delete the token file.
SCOPES = ["https://www.googleapis.com/auth/photoslibrary.readonly"]

API_ENDPOINT = "https://photoslibrary.googleapis.com"

# Base URLs of media items expire after 60 minutes
MEDIA_ITEM_CACHE_TTL = 55 * 60
ALBUM_CACHE_TTL = 10 * 60

ENV_PREFIX = "GPF_"


class FrameConfig(BaseSettings):
    """Settings used to talk to the Library API and cache its results.

    Loads from GPF_* environment variables and a local `.env` file, for example
    GPF_PHOTOS_TO_LOAD=300. GPF_SCOPES takes a comma separated list, and a TTL
    set to None keeps cached items forever.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_parse_none_str="None",
        extra="ignore",
    )

    api_endpoint: str = API_ENDPOINT
    scopes: Annotated[List[str], NoDecode] = Field(default_factory=lambda: list(SCOPES))
    # Minimum number of photos loaded by a search, -1 loads everything
    photos_to_load: int = 150
    search_page_size: int = 100
    album_page_size: int = 50
    album_cache_ttl: Optional[int] = ALBUM_CACHE_TTL
    media_item_cache_ttl: Optional[int] = MEDIA_ITEM_CACHE_TTL
    token_path: str = "token.json"
    credentials_path: str = "client_secret.json"
    cache_db_path: str = "frame_cache.db"

    @field_validator("scopes", mode="before")
    @classmethod
    def _split_scopes(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [scope.strip() for scope in value.split(",") if scope.strip()]
        return value
