import os
from datetime import timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from s3preup.api.deps import get_provider
from s3preup.core.config import get_settings
from s3preup.services import upload as upload_service

_AWS_ENV_VARS = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_PROFILE",
    "AWS_DEFAULT_PROFILE",
    "AWS_ROLE_ARN",
    "AWS_WEB_IDENTITY_TOKEN_FILE",
    "AWS_CONTAINER_CREDENTIALS_RELATIVE_URI",
    "AWS_CONTAINER_CREDENTIALS_FULL_URI",
)


class FakeUploadProvider:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[tuple[str, timedelta]] = []

    def presigned_upload_url(self, destination: str, expires: timedelta) -> str:
        self.calls.append((destination, expires))
        if self.error is not None:
            raise self.error
        return f"https://example.com/put/{destination}"


@pytest.fixture(scope="session", autouse=True)
def configure_environment():
    os.environ["ENV"] = "test"
    os.environ["S3_BUCKET_UPLOADS"] = "test-bucket"
    os.environ["S3_REGION"] = "us-east-1"
    os.environ["UPLOAD_PREFIX"] = "uploads"
    os.environ["PRESIGN_EXPIRES_SECONDS"] = "900"
    get_settings.cache_clear()
    upload_service.reset_upload_provider()
    yield
    upload_service.reset_upload_provider()


@pytest.fixture
def isolated_aws(monkeypatch, tmp_path):
    """Cut boto3 off from the host's credentials, config files and metadata."""
    for name in _AWS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    return monkeypatch


@pytest.fixture
def fake_aws_credentials(isolated_aws):
    isolated_aws.setenv("AWS_ACCESS_KEY_ID", "testing")
    isolated_aws.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    return isolated_aws


@pytest.fixture
def fake_provider() -> FakeUploadProvider:
    return FakeUploadProvider()


@pytest.fixture
def app_instance(fake_provider):
    from s3preup.main import create_app

    app = create_app()
    app.dependency_overrides[get_provider] = lambda: fake_provider
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app_instance):
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
