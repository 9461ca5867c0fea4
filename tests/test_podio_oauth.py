"""Test authorization URL, code exchange and token refresh."""
from urllib.parse import parse_qs, urlparse

import pytest

from config.loader import OAuth2Config
from errors import TransportError, UpstreamAuthError
from podio_oauth import PodioOAuthManager
from podio_oauth.authorization import AuthorizationURLBuilder
from podio_oauth.constants import TOKEN_URL
from podio_oauth.credentials import CredentialPair


def test_authorize_url_matches_expected(oauth_config):
    url = AuthorizationURLBuilder(oauth_config).get_authorize_url()
    assert url == "https://podio.com/oauth/authorize?client_id=c1&redirect_uri=https%3A%2F%2Fapp%2Fcb"


def test_authorize_url_encodes_values():
    config = OAuth2Config(client_id="id with space&x", client_secret="s", redirect_url="https://app/cb?a=1&b=2")
    url = AuthorizationURLBuilder(config).get_authorize_url()

    assert "&b=2" not in url
    query = parse_qs(urlparse(url).query)
    assert query["client_id"] == ["id with space&x"]
    assert query["redirect_uri"] == ["https://app/cb?a=1&b=2"]


def test_authorize_url_includes_scope_when_configured(oauth_config):
    url = AuthorizationURLBuilder(oauth_config, scope="contact:read").get_authorize_url()
    query = parse_qs(urlparse(url).query)
    assert query["scope"] == ["contact:read"]


def test_authorize_url_makes_no_network_call(oauth_config, transport):
    PodioOAuthManager(oauth_config, transport).get_authorize_url()
    assert transport.calls == []


async def test_exchange_code_returns_credential_pair(oauth_config, transport):
    transport.form_handlers[TOKEN_URL] = lambda form: {"access_token": "AT1", "refresh_token": "RT1", "expires_in": 28800}

    pair = await PodioOAuthManager(oauth_config, transport).exchange_code("xyz")

    assert pair == CredentialPair("AT1", "RT1")
    assert transport.calls[0]["form"] == {
        "grant_type": "authorization_code",
        "client_id": "c1",
        "redirect_uri": "https://app/cb",
        "client_secret": "s3cret",
        "code": "xyz",
    }


async def test_exchange_code_rejected_by_podio(oauth_config, transport):
    def reject(form):
        raise TransportError('{"error": "invalid_grant"}', status_code=400)

    transport.form_handlers[TOKEN_URL] = reject

    with pytest.raises(UpstreamAuthError, match="400"):
        await PodioOAuthManager(oauth_config, transport).exchange_code("bad")


@pytest.mark.parametrize("body", [
    {"refresh_token": "RT1"},
    {"access_token": "AT1"},
    {"access_token": "", "refresh_token": "RT1"},
    ["not", "an", "object"],
])
async def test_exchange_code_requires_both_tokens(oauth_config, transport, body):
    transport.form_handlers[TOKEN_URL] = lambda form: body

    with pytest.raises(UpstreamAuthError):
        await PodioOAuthManager(oauth_config, transport).exchange_code("xyz")


async def test_refresh_returns_only_access_token(oauth_config, transport):
    transport.form_handlers[TOKEN_URL] = lambda form: {"access_token": "AT_NEW", "refresh_token": "RT_VALID"}

    token = await PodioOAuthManager(oauth_config, transport).refresh_access_token("RT_VALID")

    assert token == "AT_NEW"
    assert transport.calls[0]["form"] == {
        "grant_type": "refresh_token",
        "client_id": "c1",
        "client_secret": "s3cret",
        "refresh_token": "RT_VALID",
    }


async def test_refresh_accepts_response_without_refresh_token(oauth_config, transport):
    transport.form_handlers[TOKEN_URL] = lambda form: {"access_token": "AT_NEW"}
    assert await PodioOAuthManager(oauth_config, transport).refresh_access_token("RT") == "AT_NEW"


async def test_refresh_rejected_by_podio(oauth_config, transport):
    def reject(form):
        raise TransportError("invalid refresh token", status_code=401)

    transport.form_handlers[TOKEN_URL] = reject

    with pytest.raises(UpstreamAuthError):
        await PodioOAuthManager(oauth_config, transport).refresh_access_token("RT_REVOKED")


async def test_refresh_with_unparseable_body(oauth_config, transport):
    transport.form_handlers[TOKEN_URL] = lambda form: {"error": "server_error"}

    with pytest.raises(UpstreamAuthError, match="missing access token"):
        await PodioOAuthManager(oauth_config, transport).refresh_access_token("RT")
