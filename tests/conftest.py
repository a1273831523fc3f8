"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

import httpx
import pytest

# Ensure project root is on path when running pytest from anywhere
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from mgtapi.transit import TransitClient  # noqa: E402

TEST_STOP_ID = "9d7f733a-d532-4fca-a922-4c978b79681c"
TEST_BASE_URL = "http://transit.test/api/"

FAKE_API_RESPONSE = """
{
    "id": "9d7f733a-d532-4fca-a922-4c978b79681c",
    "name": "ул. Льва Толстого",
    "type": "ground",
    "routePath": [
        {
            "id": "bus_123",
            "type": "bus",
            "number": "М10",
            "lastStopName": "Киевский вокзал",
            "color": "#FF0000",
            "fontColor": "#FFFFFF",
            "externalForecast": [
                {
                    "time": 1719752400,
                    "byTelemetry": 1,
                    "tmId": 987654,
                    "routePathId": "bus_123"
                }
            ]
        }
    ]
}
"""


@pytest.fixture
def stop_json() -> str:
    return FAKE_API_RESPONSE


@pytest.fixture
def make_client():
    """Build a TransitClient whose requests are answered by `handler` (an httpx.MockTransport)."""
    clients: list[TransitClient] = []

    def _make(handler, **kwargs) -> TransitClient:
        client = TransitClient(TEST_BASE_URL, transport=httpx.MockTransport(handler), **kwargs)
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.close()
