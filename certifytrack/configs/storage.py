import io
import logging
import secrets
import time

from minio import Minio, S3Error

from certifytrack.configs import settings

logger = logging.getLogger(__name__)

client = Minio(
            settings.STORAGE_ENDPOINT,
            access_key=settings.STORAGE_ACCESS_KEY,
            secret_key=settings.STORAGE_SECRET_KEY,
            secure=settings.STORAGE_SECURE,
        )


def make_object_name(folder: str, file_name: str) -> str:
    # the extension is whatever follows the last dot, or the whole name if there is none
    ext = file_name.split(".")[-1]
    return f"{folder}/{secrets.token_hex(6)}_{int(time.time() * 1000)}.{ext}"


def get_public_url(object_name: str, bucket: str = settings.STORAGE_BUCKET) -> str:
    base = settings.STORAGE_PUBLIC_URL or f"{'https' if settings.STORAGE_SECURE else 'http'}://{settings.STORAGE_ENDPOINT}"
    return f"{base.rstrip('/')}/{bucket}/{object_name}"


def upload_image(data: bytes, file_name: str, folder: str, content_type: str = "application/octet-stream") -> str:
    """Store an image under ``folder`` with a generated unique name and return its public URL."""
    object_name = make_object_name(folder, file_name)
    try:
        client.put_object(
            settings.STORAGE_BUCKET,
            object_name,
            io.BytesIO(data),
            length=len(data),
            content_type=content_type,
        )
    except S3Error as e:
        logger.error("Error uploading image %s: %s", object_name, e)
        raise
    return get_public_url(object_name)
