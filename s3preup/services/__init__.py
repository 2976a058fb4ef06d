from s3preup.services.upload import (
    S3Provider,
    UploadProvider,
    generate_upload_key,
    get_upload_provider,
    reset_upload_provider,
)

__all__ = [
    "S3Provider",
    "UploadProvider",
    "generate_upload_key",
    "get_upload_provider",
    "reset_upload_provider",
]
