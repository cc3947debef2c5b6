import os
import ssl
from typing import Any, Dict, Optional, Tuple

import certifi
import truststore

from .constants import (
    ENV_DISABLE_SSL_VERIFY,
    ENV_REQUESTS_CA_BUNDLE,
    ENV_SSL_CERT_DIR,
    ENV_SSL_CERT_FILE,
)


def _env_location(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def custom_ca_locations() -> Optional[Tuple[str, Optional[str]]]:
    """CA file and directory requested through the environment, if any.

    ``SSL_CERT_FILE`` wins over ``REQUESTS_CA_BUNDLE``. When only
    ``SSL_CERT_DIR`` is set, the certifi bundle is used as the CA file.
    """
    cafile = _env_location(ENV_SSL_CERT_FILE) or _env_location(ENV_REQUESTS_CA_BUNDLE)
    capath = _env_location(ENV_SSL_CERT_DIR)
    if cafile is None and capath is None:
        return None
    return cafile or certifi.where(), capath


def create_ssl_context() -> ssl.SSLContext:
    """OS trust store by default, explicit CA locations when configured."""
    locations = custom_ca_locations()
    if locations is None:
        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    cafile, capath = locations
    return ssl.create_default_context(cafile=cafile, capath=capath)


def get_httpx_client_kwargs(follow_redirects: bool = True) -> Dict[str, Any]:
    """Keyword arguments shared by every httpx client the library creates.

    Timeouts are disabled at the httpx level: request timeouts are enforced
    per attempt through the cancellation token instead.
    """
    disable_verify = os.environ.get(ENV_DISABLE_SSL_VERIFY, "").lower() in (
        "1",
        "true",
        "yes",
    )
    return {
        "verify": False if disable_verify else create_ssl_context(),
        "follow_redirects": follow_redirects,
        "timeout": None,
        "trust_env": True,
    }
