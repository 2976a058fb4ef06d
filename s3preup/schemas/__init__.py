from s3preup.schemas.upload import PresignRequest, PresignResponse

__all__ = [
    "PresignRequest",
    "PresignResponse",
]
