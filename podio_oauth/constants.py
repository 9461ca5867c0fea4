"""
Podio OAuth2 endpoints (hardcoded - not user configurable)
"""

AUTHORIZE_URL = "https://podio.com/oauth/authorize"
TOKEN_URL = "https://podio.com/oauth/token"

# Separator between access and refresh token in the bridge API key
CREDENTIAL_SEPARATOR = ":"
