"""End-to-end tests for the bridge adapter against a fake Podio."""
import pytest

from bridge.adapter import PodioAdapter
from bridge.models import BridgeConfig
from contacts.client import CONTACT_URL
from contacts.models import ContactMappingOptions, PhoneNumberLabel
from errors import (
    InvalidCredentialError,
    MissingAuthorizationCodeError,
    TransportError,
    UpstreamAuthError,
    UpstreamContactFetchError,
)
from podio_oauth.constants import TOKEN_URL
from tests.fakes import bearer

JANE = {"profile_id": 42, "name": "Jane", "phone": ["123"], "mail": [], "link": "u"}


def podio_contacts(valid_token, body):
    def handler(headers):
        if bearer(headers) != valid_token:
            raise TransportError("invalid token", status_code=401)
        return body
    return handler


def podio_refresh(valid_refresh, new_access):
    def handler(form):
        if form.get("grant_type") != "refresh_token" or form.get("refresh_token") != valid_refresh:
            raise TransportError("invalid_grant", status_code=400)
        return {"access_token": new_access, "refresh_token": valid_refresh}
    return handler


async def test_redirect_url(oauth_config, transport):
    adapter = PodioAdapter(oauth_config, transport)
    assert await adapter.get_oauth2_redirect_url() == (
        "https://podio.com/oauth/authorize?client_id=c1&redirect_uri=https%3A%2F%2Fapp%2Fcb"
    )


async def test_callback_returns_api_key(oauth_config, transport):
    transport.form_handlers[TOKEN_URL] = lambda form: {"access_token": "AT1", "refresh_token": "RT1"}
    adapter = PodioAdapter(oauth_config, transport)

    result = await adapter.handle_oauth2_callback({"code": "xyz"})

    assert result.model_dump(by_alias=True) == {"apiKey": "AT1:RT1", "apiUrl": ""}
    assert transport.calls[0]["form"]["code"] == "xyz"


async def test_callback_without_code(oauth_config, transport):
    adapter = PodioAdapter(oauth_config, transport)
    with pytest.raises(MissingAuthorizationCodeError):
        await adapter.handle_oauth2_callback({})
    assert transport.calls == []


async def test_callback_token_exchange_failure(oauth_config, transport):
    def reject(form):
        raise TransportError("invalid_grant", status_code=400)

    transport.form_handlers[TOKEN_URL] = reject
    adapter = PodioAdapter(oauth_config, transport)

    with pytest.raises(UpstreamAuthError):
        await adapter.handle_oauth2_callback({"code": "expired"})


async def test_get_contacts_refreshes_expired_token(oauth_config, transport):
    transport.get_handlers[CONTACT_URL] = podio_contacts("AT_NEW", [JANE])
    transport.form_handlers[TOKEN_URL] = podio_refresh("RT_VALID", "AT_NEW")
    adapter = PodioAdapter(oauth_config, transport)

    contacts = await adapter.get_contacts(BridgeConfig(api_key="AT_EXPIRED:RT_VALID"))

    assert len(contacts) == 1
    jane = contacts[0]
    assert jane.id == "42"
    assert jane.name == "Jane"
    assert jane.email is None
    assert jane.contact_url == "u"
    assert [(p.phone_number, p.label) for p in jane.phone_numbers] == [("123", PhoneNumberLabel.WORK)]
    assert [call["method"] for call in transport.calls] == ["GET", "POST", "GET"]


async def test_get_contacts_with_valid_token_skips_refresh(oauth_config, transport):
    transport.get_handlers[CONTACT_URL] = podio_contacts("AT", [JANE])
    adapter = PodioAdapter(oauth_config, transport)

    contacts = await adapter.get_contacts(BridgeConfig(api_key="AT:RT"))

    assert [c.id for c in contacts] == ["42"]
    assert [call["method"] for call in transport.calls] == ["GET"]


async def test_get_contacts_fails_when_refreshed_token_rejected(oauth_config, transport):
    transport.get_handlers[CONTACT_URL] = podio_contacts("SOMETHING_ELSE", [JANE])
    transport.form_handlers[TOKEN_URL] = podio_refresh("RT_VALID", "AT_NEW")
    adapter = PodioAdapter(oauth_config, transport)

    with pytest.raises(UpstreamContactFetchError):
        await adapter.get_contacts(BridgeConfig(api_key="AT_EXPIRED:RT_VALID"))
    assert [call["method"] for call in transport.calls] == ["GET", "POST", "GET"]


async def test_get_contacts_fails_when_refresh_rejected(oauth_config, transport):
    transport.get_handlers[CONTACT_URL] = podio_contacts("AT_NEW", [JANE])
    transport.form_handlers[TOKEN_URL] = podio_refresh("RT_VALID", "AT_NEW")
    adapter = PodioAdapter(oauth_config, transport)

    with pytest.raises(UpstreamAuthError):
        await adapter.get_contacts(BridgeConfig(api_key="AT_EXPIRED:RT_REVOKED"))


async def test_get_contacts_invalid_api_key(oauth_config, transport):
    adapter = PodioAdapter(oauth_config, transport)
    with pytest.raises(InvalidCredentialError):
        await adapter.get_contacts(BridgeConfig(api_key="no-separator"))
    assert transport.calls == []


async def test_get_contacts_mapping_variant(oauth_config, transport):
    no_phone = {"profile_id": 7, "name": "No Phone", "link": "v"}
    transport.get_handlers[CONTACT_URL] = podio_contacts("AT", [JANE, no_phone])
    adapter = PodioAdapter(
        oauth_config,
        transport,
        mapping=ContactMappingOptions(drop_without_phone=False, label_phone_numbers=False),
    )

    contacts = await adapter.get_contacts(BridgeConfig(api_key="AT:RT"))

    assert [c.id for c in contacts] == ["42", "7"]
    assert contacts[0].phone_numbers[0].label is None
    assert contacts[1].phone_numbers == []


def test_from_settings_uses_process_settings(oauth_config, transport, monkeypatch):
    import settings

    monkeypatch.setattr(settings, "PODIO_OAUTH_SCOPE", "contact:read")
    monkeypatch.setattr(settings, "DROP_CONTACTS_WITHOUT_PHONE", False)
    monkeypatch.setattr(settings, "LABEL_PHONE_NUMBERS", True)

    adapter = PodioAdapter.from_settings(oauth_config, transport)

    assert adapter.mapping == ContactMappingOptions(drop_without_phone=False, label_phone_numbers=True)
    assert "scope=contact%3Aread" in adapter.oauth.get_authorize_url()


async def test_get_contacts_non_json_body_does_not_refresh(oauth_config, transport):
    transport.get_handlers[CONTACT_URL] = lambda headers: "<html>maintenance</html>"
    adapter = PodioAdapter(oauth_config, transport)

    assert await adapter.get_contacts(BridgeConfig(api_key="AT:RT")) == []
    assert [call["method"] for call in transport.calls] == ["GET"]
