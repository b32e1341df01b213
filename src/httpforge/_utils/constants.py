VERSION = "0.1.0"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"
HEADER_HOST = "Host"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded; charset=utf-8"

DEFAULT_USER_AGENT = f"httpforge/{VERSION}"

# Environment
ENV_USER_AGENT = "HTTPFORGE_USER_AGENT"
ENV_TIMEOUT = "HTTPFORGE_TIMEOUT"
ENV_FOLLOW_REDIRECTS = "HTTPFORGE_FOLLOW_REDIRECTS"
ENV_VERIFY_SSL = "HTTPFORGE_VERIFY_SSL"
ENV_MAX_RETRIES = "HTTPFORGE_MAX_RETRIES"
DOTENV_FILE = ".env"
