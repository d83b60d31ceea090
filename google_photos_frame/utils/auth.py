"""Authentication utilities for the Google Photos Library API."""

import logging
import os
from typing import Any, List, Optional, cast

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from google_photos_frame.config import SCOPES
from google_photos_frame.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def get_credentials(
    token_path: str, credentials_path: str, scopes: Optional[List[str]] = None
) -> Credentials:
    """Get valid user credentials from storage.

    If there are no (valid) credentials available, let the user log in.

    Args:
        token_path: Path to token.json file
        credentials_path: Path to client secrets file
        scopes: OAuth scopes to request, read-only library access by default

    Returns:
        Valid credentials object

    Raises:
        FileNotFoundError: If the client secrets file is not found
    """
    scopes = scopes or SCOPES
    creds = None
    if os.path.exists(token_path):
        creds = Credentials.from_authorized_user_file(token_path, scopes)

    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            logger.debug("Refreshing expired credentials")
            creds.refresh(Request())
        else:
            if not os.path.exists(credentials_path):
                raise FileNotFoundError(f"Missing credentials file at {credentials_path}")

            flow = InstalledAppFlow.from_client_secrets_file(credentials_path, scopes)
            creds = flow.run_local_server(port=0)

        # Save the credentials for the next run
        with open(token_path, "w", encoding="utf-8") as token:
            token.write(creds.to_json())

    return cast(Credentials, creds)


def authenticate_google_photos(
    token_path: str = "token.json",
    credentials_path: str = "client_secret.json",
    scopes: Optional[List[str]] = None,
    api_endpoint: Optional[str] = None,
) -> Any:
    """Authenticate with the Google Photos Library API and build the service.

    Args:
        token_path: Path to token.json file
        credentials_path: Path to client secrets file
        scopes: OAuth scopes to request
        api_endpoint: Base URL requests are sent to, the discovered one if None

    Returns:
        Google Photos Library API service object

    Raises:
        AuthenticationError: If authentication fails
    """
    try:
        creds = get_credentials(token_path, credentials_path, scopes)
        client_options = {"api_endpoint": api_endpoint} if api_endpoint else None
        return build(
            "photoslibrary",
            "v1",
            credentials=creds,
            static_discovery=False,
            client_options=client_options,
        )
    except (OSError, ValueError, GoogleAuthError) as e:
        logger.error("Authentication failed: %s", e)
        raise AuthenticationError(f"Error authenticating with Google Photos: {e}") from e


def remove_credentials(token_path: str) -> bool:
    """Delete the saved token so the next run asks the user to log in again.

    Returns:
        True if a token file was removed
    """
    if not os.path.exists(token_path):
        return False

    os.remove(token_path)
    logger.info("Removed saved credentials %s", token_path)
    return True
