import logging

from fastapi import HTTPException, status

from s3preup.core.errors import CONFIGURATION_ERRORS
from s3preup.services.upload import UploadProvider, get_upload_provider

logger = logging.getLogger(__name__)


def get_provider() -> UploadProvider:
    try:
        return get_upload_provider()
    except CONFIGURATION_ERRORS as exc:
        logger.exception("S3 upload provider could not be configured")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Upload storage is not configured",
        ) from exc
