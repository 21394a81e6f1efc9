import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure local source package (src/httprest) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from httprest import HttpTransportFactory, RestClient, RestClientOptions  # noqa: E402
from httprest._utils import clear_base_url_overrides_cache  # noqa: E402


@pytest.fixture(autouse=True)
def clean_overrides() -> Generator[None, None, None]:
    """Reset cached base URL overrides around each test."""
    clear_base_url_overrides_cache()
    yield
    clear_base_url_overrides_cache()


@pytest.fixture
def base_url() -> str:
    return "https://test.example.com"


@pytest.fixture
def client_name() -> str:
    return "test"


@pytest.fixture
def transport_factory(
    base_url: str, client_name: str
) -> Generator[HttpTransportFactory, None, None]:
    factory = HttpTransportFactory()
    factory.register(client_name, base_url=base_url)
    yield factory
    factory.close()


@pytest.fixture
def options(client_name: str) -> RestClientOptions:
    return RestClientOptions(http_client_name=client_name)


@pytest.fixture
def client(
    transport_factory: HttpTransportFactory, options: RestClientOptions
) -> RestClient:
    return RestClient(transport_factory, options)
