"""Bridge request and response shapes"""

from contacts.models import BridgeModel


class BridgeConfig(BridgeModel):
    """Per-call configuration supplied by the bridge host"""
    api_key: str
    api_url: str = ""


class OAuth2CallbackResult(BridgeModel):
    """Credentials returned to the bridge host after the OAuth2 callback

    Podio has no per-account API URL, so api_url is always empty.
    """
    api_key: str
    api_url: str = ""


class OAuth2RedirectResult(BridgeModel):
    """Authorization URL the bridge host should redirect the user to"""
    redirect_url: str
