# File: sitemap_batcher/storage/s3.py
"""sitemap_batcher.storage.s3: S3 sink built on boto3."""

from __future__ import annotations

from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from sitemap_batcher.errors import StorageError
from sitemap_batcher.logger import get_logger

__all__ = ["S3Storage"]

log = get_logger("storage.s3")


class S3Storage:
    """Writes objects with ``PutObject``.

    Credentials come from the standard boto3 chain (``AWS_ACCESS_KEY_ID``,
    ``AWS_SECRET_ACCESS_KEY``, instance/role credentials, ...).
    """

    def __init__(
        self,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        client: Any = None,
    ) -> None:
        self.region = region
        self.endpoint_url = endpoint_url
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = boto3.client(
                "s3", region_name=self.region, endpoint_url=self.endpoint_url
            )
        return self._client

    def put(self, bucket_name: str, object_key: str, body: bytes) -> None:
        log.info("Uploading s3://%s/%s (%d bytes)", bucket_name, object_key, len(body))
        try:
            self.client.put_object(
                Bucket=bucket_name,
                Key=object_key,
                Body=body,
                ContentType="application/json",
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"upload to s3://{bucket_name}/{object_key} failed: {exc}") from exc
