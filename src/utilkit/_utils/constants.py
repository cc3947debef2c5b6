# Environment variables
ENV_DEFAULT_RETRIES = "UTILKIT_DEFAULT_RETRIES"
ENV_DEFAULT_TIMEOUT = "UTILKIT_DEFAULT_TIMEOUT"
ENV_FOLLOW_REDIRECTS = "UTILKIT_FOLLOW_REDIRECTS"
ENV_DISABLE_SSL_VERIFY = "UTILKIT_DISABLE_SSL_VERIFY"
ENV_DEBUG = "UTILKIT_DEBUG"
ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_PATH = "path"
HEADER_METHOD = "method"
HEADER_SEC_FETCH_MODE = "Sec-Fetch-Mode"
HEADER_SEC_FETCH_SITE = "Sec-Fetch-Site"

DEFAULT_ACCEPT = "application/json, text/plain, */*"
SEC_FETCH_MODE_CORS = "cors"
SEC_FETCH_SITE_SAME_ORIGIN = "same-origin"

# Media types
MEDIA_TYPE_JSON = "application/json"
MEDIA_TYPE_OCTET_STREAM = "application/octet-stream"
MEDIA_TYPE_MULTIPART_FORM = "multipart/form-data"
MEDIA_TYPE_URLENCODED_FORM = "application/x-www-form-urlencoded"
MEDIA_TYPE_TEXT_PREFIX = "text/"

# Body codec markers
CONTENT_TYPE_DEFAULT = "default"
CONTENT_TYPE_AUTO = "auto"

ABORTED_MESSAGE = "Request aborted"
