import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status

from s3preup.api.deps import get_provider
from s3preup.core.config import get_settings
from s3preup.core.errors import SIGNING_ERRORS
from s3preup.schemas import PresignRequest, PresignResponse
from s3preup.services.upload import UploadProvider, generate_upload_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.post("/presign", response_model=PresignResponse)
async def presign_upload(
    payload: PresignRequest,
    provider: UploadProvider = Depends(get_provider),
) -> PresignResponse:
    settings = get_settings()
    expires_in = payload.expires_in or settings.presign_expires_seconds
    object_key = generate_upload_key(payload.filename, settings.upload_prefix)
    try:
        upload_url = provider.presigned_upload_url(object_key, timedelta(seconds=expires_in))
    except SIGNING_ERRORS as exc:
        logger.exception("Failed to sign upload URL for %s", object_key)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Could not sign upload URL",
        ) from exc

    return PresignResponse(upload_url=upload_url, object_key=object_key, expires_in=expires_in)
