"""
Object store for uploaded video binaries.

Wraps google-cloud-storage to:
  - Upload a video under a folder-qualified object name
  - Resolve the public URL an uploaded object is served from
  - Remove an object, by name or by its public URL
"""
from __future__ import annotations

import logging
from typing import BinaryIO, Optional, Union

from google.api_core.exceptions import GoogleAPIError, NotFound
from google.auth.exceptions import GoogleAuthError
from google.cloud import storage

from learning_hub.core.config.gcs_config import GCSConfig
from learning_hub.core.errors import RemoveFailed, UploadFailed

logger = logging.getLogger(__name__)

# Transport failures from the underlying HTTP stack surface as OSError subclasses;
# expired or missing credentials as GoogleAuthError.
_STORAGE_ERRORS = (GoogleAPIError, GoogleAuthError, OSError)


class ObjectStoreService:
    """Stores video objects in the configured bucket."""

    def __init__(self, config: GCSConfig, storage_client: Optional[storage.Client] = None):
        self._config = config
        self._client = storage_client or storage.Client()

    @property
    def bucket_name(self) -> str:
        return self._config.video_bucket

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def upload(
        self,
        object_name: str,
        content: Union[bytes, BinaryIO],
        content_type: Optional[str] = None,
    ) -> None:
        """Upload *content* as *object_name*.  Raises UploadFailed on rejection."""
        blob = self._client.bucket(self.bucket_name).blob(object_name)
        try:
            if isinstance(content, (bytes, bytearray)):
                blob.upload_from_string(bytes(content), content_type=content_type)
            else:
                blob.upload_from_file(content, content_type=content_type)
        except _STORAGE_ERRORS as exc:
            raise UploadFailed(f"Could not upload {object_name}: {exc}") from exc
        logger.info(f"Uploaded gs://{self.bucket_name}/{object_name}")

    def remove(self, object_name: str) -> None:
        """Delete *object_name*.  An object that is already gone counts as removed."""
        blob = self._client.bucket(self.bucket_name).blob(object_name)
        try:
            blob.delete()
        except NotFound:
            logger.warning(f"gs://{self.bucket_name}/{object_name} was already removed")
            return
        except _STORAGE_ERRORS as exc:
            raise RemoveFailed(f"Could not remove {object_name}: {exc}") from exc
        logger.info(f"Removed gs://{self.bucket_name}/{object_name}")

    # ------------------------------------------------------------------
    # URLs
    # ------------------------------------------------------------------

    def public_url(self, object_name: str) -> str:
        return self._config.public_object_url(object_name, self.bucket_name)

    def object_path_from_url(self, url: str) -> Optional[str]:
        return self._config.object_path_from_url(url, self.bucket_name)
