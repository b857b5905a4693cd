"""
Gmail credential loading from a pre-provisioned OAuth token
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from ..config import GMAIL_SCOPE
from ..exceptions import CredentialError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_URI = 'https://oauth2.googleapis.com/token'


def _read_json(path: Path, what: str) -> Dict[str, Any]:
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except OSError as e:
        logger.error(f"Unable to read {what} file: {e}")
        raise CredentialError(f"Unable to read {what} file {path}: {e}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Unable to parse {what} file: {e}")
        raise CredentialError(f"Unable to parse {what} file {path}: {e}") from e

    if not isinstance(data, dict):
        raise CredentialError(f"{what} file {path} must contain a JSON object")
    return data


def parse_expiry(value: Optional[str]) -> Optional[datetime]:
    """Parse a token expiry into the naive UTC datetime google-auth expects"""
    if not value:
        return None
    try:
        expiry = datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise CredentialError(f"Invalid token expiry {value!r}: {e}") from e
    if expiry.tzinfo is not None:
        expiry = expiry.astimezone(timezone.utc).replace(tzinfo=None)
    # 0001-01-01 is the unset expiry written by some token tools
    if expiry.year <= 1:
        return None
    return expiry


def load_credentials(client_secret_file: Path, token_file: Path) -> Credentials:
    """Build OAuth credentials from the client descriptor and saved token

    Args:
        client_secret_file: Google console client secret download
        token_file: Previously issued access/refresh token

    Returns:
        Credentials scoped to full mail access

    Raises:
        CredentialError: If either file is missing, unreadable or malformed
    """
    secret = _read_json(client_secret_file, 'client secret')
    client = secret.get('installed') or secret.get('web')
    if not isinstance(client, dict):
        logger.error("Unable to parse client secret file to config: no 'installed' or 'web' client")
        raise CredentialError(f"{client_secret_file} has no 'installed' or 'web' OAuth client")

    token = _read_json(token_file, 'token')
    access_token = token.get('access_token') or token.get('token')
    refresh_token = token.get('refresh_token')
    if not access_token and not refresh_token:
        logger.error("Unable to get token: no access or refresh token")
        raise CredentialError(f"{token_file} has neither an access token nor a refresh token")

    return Credentials(
        token=access_token,
        refresh_token=refresh_token,
        token_uri=client.get('token_uri') or DEFAULT_TOKEN_URI,
        client_id=client.get('client_id'),
        client_secret=client.get('client_secret'),
        scopes=[GMAIL_SCOPE],
        expiry=parse_expiry(token.get('expiry')),
    )


def load_gmail_service(client_secret_file: Path, token_file: Path):
    """Get an authenticated Gmail v1 service

    Raises:
        CredentialError: If the credentials cannot be loaded or the service built
    """
    credentials = load_credentials(client_secret_file, token_file)
    try:
        return build('gmail', 'v1', credentials=credentials, cache_discovery=False)
    except Exception as e:
        logger.error(f"Unable to initiate Gmail service: {e}")
        raise CredentialError(f"Unable to initiate Gmail service: {e}") from e
