# Configuration
DEFAULT_CONFIGURATION_NAME = "Default"
DEFAULT_ENCODING = "utf-8"
APPLICATION_JSON_MEDIA_TYPE = "application/json"

# Environment variables
ENV_BASE_URL_PREFIX = "HTTPREST_"
ENV_BASE_URL_SUFFIX = "_URL"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"

# Logging
LOGGER_NAME = "httprest"
DEFAULT_EVENT_ID = 1000
HTTP_METHOD_EVENT_IDS: dict[str, int] = {
    "GET": 1001,
    "POST": 1002,
    "PUT": 1003,
    "DELETE": 1004,
    "OPTIONS": 1005,
    "HEAD": 1006,
    "TRACE": 1007,
    "PATCH": 1008,
}
