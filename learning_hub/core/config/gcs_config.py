"""Object storage configuration loaded from environment variables."""
import os
from typing import Optional
from urllib.parse import quote, unquote


class GCSConfig:
    video_bucket: str
    gcs_public_base_url: str

    def __init__(self):
        self.video_bucket = os.getenv("VIDEO_BUCKET", "doctor-videos")
        self.gcs_public_base_url = os.getenv(
            "GCS_PUBLIC_BASE_URL", "https://storage.googleapis.com"
        ).rstrip("/")

    def public_object_url(self, object_name: str, bucket: Optional[str] = None) -> str:
        """Returns the direct public URL for an object in the video bucket."""
        bucket = bucket or self.video_bucket
        return f"{self.gcs_public_base_url}/{bucket}/{quote(object_name, safe='/~')}"

    def object_path_from_url(self, url: str, bucket: Optional[str] = None) -> Optional[str]:
        """Recover the object name from a public object URL.

        The name is whatever follows ``<public base>/<bucket>/``.  URLs served
        from another host (a CDN or an emulator) are matched on the
        ``/<bucket>/`` segment instead.  Returns None when neither matches.
        """
        bucket = bucket or self.video_bucket
        prefix = f"{self.gcs_public_base_url}/{bucket}/"
        if url.startswith(prefix):
            name = url[len(prefix):]
        else:
            marker = f"/{bucket}/"
            if marker not in url:
                return None
            name = url.split(marker, 1)[1]
        name = name.split("?", 1)[0].split("#", 1)[0]
        return unquote(name) or None
