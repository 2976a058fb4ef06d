import asyncio
import logging
import re
from datetime import timedelta
from pathlib import Path
from typing import Any, Protocol, runtime_checkable
from uuid import uuid4

import boto3
from botocore.client import Config
from botocore.exceptions import NoCredentialsError

from s3preup.core.config import get_settings

logger = logging.getLogger(__name__)


@runtime_checkable
class UploadProvider(Protocol):
    """Anything that can hand out a presigned PUT URL for an object key."""

    def presigned_upload_url(self, destination: str, expires: timedelta) -> str: ...


class S3Provider:
    """Presigned upload URLs for a single S3 bucket.

    Holds a bucket name and a boto3 S3 client; both are fixed at construction,
    so one instance can be shared across requests and threads.
    """

    def __init__(self, bucket: str, client: Any) -> None:
        self._bucket = bucket
        self._client = client

    @property
    def bucket(self) -> str:
        return self._bucket

    @property
    def client(self) -> Any:
        return self._client

    @classmethod
    def from_region(
        cls,
        bucket: str,
        region: str,
        *,
        endpoint_url: str | None = None,
    ) -> "S3Provider":
        """Resolve ambient AWS configuration for ``region`` and build a provider.

        Credentials come from the standard boto3 chain (environment, shared
        files, SSO, instance metadata). botocore errors propagate as raised;
        an empty chain raises ``NoCredentialsError`` here rather than at
        signing time.
        """
        session = boto3.session.Session(region_name=region)
        client = session.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
            config=Config(signature_version="s3v4"),
        )
        if session.get_credentials() is None:
            raise NoCredentialsError()

        logger.info("S3 upload provider ready for bucket %s in %s", bucket, region)
        return cls(bucket, client)

    @classmethod
    async def create(
        cls,
        bucket: str,
        region: str,
        *,
        endpoint_url: str | None = None,
    ) -> "S3Provider":
        # Credential discovery may hit the metadata endpoint; keep it off the loop.
        return await asyncio.to_thread(
            cls.from_region, bucket, region, endpoint_url=endpoint_url
        )

    def presigned_upload_url(self, destination: str, expires: timedelta) -> str:
        """Sign a PUT of ``destination`` into the bucket, valid for ``expires``.

        The key and expiry are passed through as given; S3 enforces its own
        limits on both.
        """
        expires_in = int(expires.total_seconds())
        logger.debug("Signing upload of %s for %ss", destination, expires_in)
        return self._client.generate_presigned_url(
            "put_object",
            Params={"Bucket": self._bucket, "Key": destination},
            ExpiresIn=expires_in,
            HttpMethod="PUT",
        )


def _sanitize_filename(filename: str) -> str:
    name = Path(filename).name
    name = re.sub(r"[^A-Za-z0-9._-]+", "_", name)
    return name or "file"


def generate_upload_key(filename: str, prefix: str = "uploads") -> str:
    safe_name = _sanitize_filename(filename)
    prefix = prefix.strip("/")
    if not prefix:
        return f"{uuid4()}_{safe_name}"
    return f"{prefix}/{uuid4()}_{safe_name}"


_upload_provider: UploadProvider | None = None


def get_upload_provider() -> UploadProvider:
    global _upload_provider
    if _upload_provider is None:
        settings = get_settings()
        _upload_provider = S3Provider.from_region(
            settings.s3_bucket_uploads,
            settings.s3_region,
            endpoint_url=str(settings.s3_endpoint) if settings.s3_endpoint else None,
        )
    return _upload_provider


def reset_upload_provider() -> None:
    global _upload_provider
    _upload_provider = None
