"""
Source fetch task.

Loads the whole payload of a stored document before parsing:
http(s) URLs via httpx, ``s3://bucket/key`` URIs via boto3, anything
else from the local file system.

Dependencies: httpx, boto3
System role: First stage of document ingestion pipeline
"""

import asyncio
import logging
from pathlib import Path
from urllib.parse import urlparse

import boto3
import httpx
from botocore.exceptions import BotoCoreError, ClientError

from studybuddy.core.exceptions import FetchError

logger = logging.getLogger(__name__)


class FetchTask:
    """Fetch raw document bytes from a source locator."""

    def __init__(
        self,
        timeout_seconds: float = 60.0,
        s3_region: str = "ap-southeast-2",
        http_client: httpx.AsyncClient | None = None,
        s3_client=None,
    ) -> None:
        """
        Initialize fetch task.

        Args:
            timeout_seconds: HTTP request timeout
            s3_region: AWS region for s3:// locators
            http_client: Optional shared httpx client (created per call if None)
            s3_client: Optional boto3 S3 client (created lazily if None)
        """
        self._timeout = timeout_seconds
        self._s3_region = s3_region
        self._http_client = http_client
        self._s3_client = s3_client

    async def fetch(self, locator: str) -> bytes:
        """
        Fetch the complete payload behind ``locator``.

        Args:
            locator: http(s) URL, s3:// URI or local path

        Returns:
            bytes: Raw document bytes

        Raises:
            FetchError: When the source is unreachable or missing
        """
        if not locator:
            raise FetchError("Source locator is required", locator)

        scheme = urlparse(locator).scheme.lower()
        if scheme in ("http", "https"):
            data = await self._fetch_http(locator)
        elif scheme == "s3":
            data = await asyncio.to_thread(self._fetch_s3, locator)
        else:
            data = await asyncio.to_thread(self._read_local, locator)

        logger.info(
            f"{__name__}:fetch - Downloaded source",
            extra={"locator": locator, "size_bytes": len(data)},
        )
        return data

    async def _fetch_http(self, url: str) -> bytes:
        try:
            if self._http_client is not None:
                response = await self._http_client.get(url, follow_redirects=True)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url, follow_redirects=True)
            response.raise_for_status()
            return response.content
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Remote source returned HTTP {e.response.status_code}",
                url,
                details={"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Remote source unreachable: {e}", url) from e

    def _fetch_s3(self, uri: str) -> bytes:
        parsed = urlparse(uri)
        bucket, key = parsed.netloc, parsed.path.lstrip("/")
        if not bucket or not key:
            raise FetchError(f"Invalid S3 URI: {uri}", uri)

        if self._s3_client is None:
            self._s3_client = boto3.client("s3", region_name=self._s3_region)

        try:
            response = self._s3_client.get_object(Bucket=bucket, Key=key)
            return response["Body"].read()
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if error_code in ("404", "NoSuchKey"):
                raise FetchError(f"File not found in S3: {uri}", uri) from e
            raise FetchError(f"Failed to download from S3: {e}", uri) from e
        except BotoCoreError as e:
            raise FetchError(f"Failed to download from S3: {e}", uri) from e

    def _read_local(self, path: str) -> bytes:
        file_path = Path(path)
        if not file_path.is_file():
            raise FetchError(f"File not found: {path}", path)
        try:
            return file_path.read_bytes()
        except OSError as e:
            raise FetchError(f"Failed to read file: {e}", path) from e
