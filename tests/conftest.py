import sys
from pathlib import Path

import httpx
import pytest

# Ensure local source package (src/utilkit) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from tests.utils.fake_transport import FakeTransport  # noqa: E402
from utilkit._config import Config  # noqa: E402
from utilkit._services._dispatcher import RequestDispatcher  # noqa: E402
from utilkit.verbs import set_dispatcher  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "UTILKIT_DEFAULT_RETRIES",
        "UTILKIT_DEFAULT_TIMEOUT",
        "UTILKIT_FOLLOW_REDIRECTS",
        "UTILKIT_DISABLE_SSL_VERIFY",
        "UTILKIT_DEBUG",
        "SSL_CERT_FILE",
        "SSL_CERT_DIR",
        "REQUESTS_CA_BUNDLE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_default_dispatcher():
    set_dispatcher(None)
    yield
    set_dispatcher(None)


@pytest.fixture
def base_url() -> str:
    return "https://example.test"


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def json_transport() -> FakeTransport:
    return FakeTransport(lambda: httpx.Response(200, json={"ok": True}))


@pytest.fixture
def dispatcher(json_transport: FakeTransport, config: Config) -> RequestDispatcher:
    return RequestDispatcher(transport=json_transport, config=config)
