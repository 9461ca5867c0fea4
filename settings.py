from config.loader import get_config_loader

# Get the config loader instance
config = get_config_loader()

# Server configuration
PORT = config.get("PORT", 8080)
LOG_LEVEL = config.get("LOG_LEVEL", "info")
BIND_ADDRESS = config.get("BIND_ADDRESS", "0.0.0.0")

# Timeout configuration for every outbound Podio call
# Connection timeout: Time to establish TCP connection
CONNECT_TIMEOUT = config.get("CONNECT_TIMEOUT", 10.0)
# Request timeout: Total time allowed for one request/response
REQUEST_TIMEOUT = config.get("REQUEST_TIMEOUT", 30.0)

# OAuth2 credentials are read from <prefix>CLIENT_ID, <prefix>CLIENT_SECRET
# and <prefix>REDIRECT_URL. Use "PODIO_" for provider-prefixed deployments.
OAUTH2_ENV_PREFIX = config.get("OAUTH2_ENV_PREFIX", "")

# Optional scope added to the authorization URL (e.g. "contact:read")
PODIO_OAUTH_SCOPE = config.get("PODIO_OAUTH_SCOPE", "")

# Contact mapping variants
# Drop Podio contacts without any phone number instead of returning them
# with an empty phone list
DROP_CONTACTS_WITHOUT_PHONE = config.get("DROP_CONTACTS_WITHOUT_PHONE", True)
# Label every phone number as WORK; when disabled the label is null
LABEL_PHONE_NUMBERS = config.get("LABEL_PHONE_NUMBERS", True)
