from s3preup.services.upload import S3Provider, UploadProvider

__all__ = ["S3Provider", "UploadProvider"]
