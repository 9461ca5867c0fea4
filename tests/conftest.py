import pytest

from config.loader import OAuth2Config
from tests.fakes import FakeTransport


@pytest.fixture
def oauth_config():
    return OAuth2Config(client_id="c1", client_secret="s3cret", redirect_url="https://app/cb")


@pytest.fixture
def transport():
    return FakeTransport()
