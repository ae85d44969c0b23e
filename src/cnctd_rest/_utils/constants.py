# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

USER_AGENT = "cnctd_rest"
CONTENT_TYPE_JSON = "application/json"

# Auth schemes
AUTH_SCHEME_TOKEN = "token"
AUTH_SCHEME_BEARER = "Bearer"

# Environment variables
ENV_INCLUDE_USER_AGENT = "CNCTD_REST_INCLUDE_USER_AGENT"
ENV_TIMEOUT = "CNCTD_REST_TIMEOUT"

