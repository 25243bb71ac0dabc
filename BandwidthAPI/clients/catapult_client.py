"""
Catapult (v1) API Client

JSON client for the Catapult API generation. Resources are addressed as
``{base_url}/{api_version}/{path}``; user-scoped resources live under
``users/{user_id}``.
"""

import os
from typing import Any, BinaryIO, Dict, List, Optional, Tuple, Union

import httpx

from BandwidthAPI.config import CATAPULT_CONFIG, load_env_settings, validate_credentials
from BandwidthAPI.schemas.media import MediaFile
from BandwidthAPI.version import __version__
from .base_client import BaseAPIClient, HTTPMethod, quote_segment
from .codecs import JSONCodec
from .exceptions import ConfigurationError

MEDIA_PATH = CATAPULT_CONFIG["endpoints"]["media"]


class CatapultClient(BaseAPIClient):
    """
    Catapult API client (JSON over HTTPS, Basic auth with token/secret)
    """

    codec = JSONCodec()

    def __init__(self,
                 user_id: str,
                 api_token: str,
                 api_secret: str,
                 api_version: Optional[str] = None,
                 base_url: Optional[str] = None,
                 timeout: Optional[float] = None,
                 custom_headers: Optional[Dict[str, str]] = None,
                 http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize Catapult client

        Args:
            user_id: Catapult user id
            api_token: API token (Basic auth identity)
            api_secret: API secret (Basic auth password)
            api_version: API version segment, defaults to CATAPULT_CONFIG
            base_url: API endpoint, defaults to CATAPULT_CONFIG
            timeout: Request timeout in seconds
            custom_headers: Additional headers
            http_client: Shared httpx.AsyncClient

        Raises:
            ConfigurationError: If any credential is missing or empty
        """
        missing = validate_credentials("Catapult", {
            "user_id": user_id,
            "api_token": api_token,
            "api_secret": api_secret
        })
        if missing:
            raise ConfigurationError(
                f"Missing auth data ({', '.join(missing)}). "
                f"Please use CatapultClient('user-id', 'api-token', 'api-secret')",
                missing_fields=missing
            )

        self.user_id = user_id
        self.api_version = CATAPULT_CONFIG["api_version"] if api_version is None else api_version

        super().__init__(
            base_url=CATAPULT_CONFIG["base_url"] if base_url is None else base_url,
            username=api_token,
            password=api_secret,
            user_agent=CATAPULT_CONFIG["user_agent"].format(version=__version__),
            timeout=CATAPULT_CONFIG["timeout_seconds"] if timeout is None else timeout,
            verify_ssl=CATAPULT_CONFIG["verify_ssl"],
            custom_headers=custom_headers,
            http_client=http_client
        )

        self.logger.info(f"Catapult client initialized ({self.base_url}, {self.api_version})")

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **overrides: Any) -> "CatapultClient":
        """
        Build a client from BANDWIDTH_* environment variables

        Keyword arguments override values read from the environment.
        """
        settings: Dict[str, Any] = load_env_settings("Catapult", dotenv_path)
        settings.update({key: value for key, value in overrides.items() if value is not None})
        return cls(
            user_id=settings.pop("user_id", ""),
            api_token=settings.pop("api_token", ""),
            api_secret=settings.pop("api_secret", ""),
            **settings
        )

    def get_path_prefix(self) -> str:
        return self.api_version

    def user_path(self, path: str) -> str:
        """Scope a resource path to the bound user"""
        return f"users/{quote_segment(self.user_id)}/{path.lstrip('/')}"

    def _media_path(self, name: str) -> str:
        return f"{self.user_path(MEDIA_PATH)}/{quote_segment(name)}"

    async def get_media_files(self) -> List[MediaFile]:
        """Return the user's media files"""
        media_files = await self.get(self.user_path(MEDIA_PATH), response_type=List[MediaFile])
        return media_files or []

    async def delete_media_file(self, name: str) -> None:
        """Remove a media file"""
        await self.delete(self._media_path(name))

    async def upload_media_file(self,
                                name: str,
                                file: Union[str, os.PathLike, bytes, BinaryIO],
                                content_type: Optional[str] = None) -> None:
        """
        Create or replace a media file

        Args:
            name: Media file name
            file: Path to a local file, raw bytes, or a binary file object
            content_type: Content type of the media (default application/octet-stream)
        """
        if isinstance(file, (str, os.PathLike)):
            with open(file, "rb") as f:
                content = f.read()
        elif isinstance(file, (bytes, bytearray)):
            content = bytes(file)
        else:
            content = file.read()

        request = self.build_request(
            HTTPMethod.PUT,
            self._media_path(name),
            content=content,
            content_type=content_type or "application/octet-stream"
        )
        response = await self.send(request)
        self.parse_response(response)

    async def download_media_file(self, name: str) -> Tuple[bytes, str]:
        """
        Download a media file

        Returns:
            Tuple of (content, content type)
        """
        request = self.build_request(HTTPMethod.GET, self._media_path(name))
        response = await self.send(request)
        self.raise_for_status(response)
        return response.content, response.headers.get("Content-Type", "")
