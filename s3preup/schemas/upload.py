from pydantic import BaseModel, Field

# S3 refuses SigV4 presigned URLs valid for longer than seven days.
MAX_PRESIGN_EXPIRES_SECONDS = 7 * 24 * 3600


class PresignRequest(BaseModel):
    filename: str = Field(..., min_length=1)
    expires_in: int | None = Field(default=None, gt=0, le=MAX_PRESIGN_EXPIRES_SECONDS)


class PresignResponse(BaseModel):
    upload_url: str
    object_key: str
    expires_in: int
