"""Pytest configuration and fixtures."""

import json

import httpx
import pytest
import respx

from aip_nlp import AipNlp

BASE_URL = "https://aip.test"
TOKEN = "24.test-token"


def gbk_response(payload: dict, status_code: int = 200) -> httpx.Response:
    """Build a response encoded the way the NLP endpoints answer."""
    return httpx.Response(
        status_code,
        content=json.dumps(payload, ensure_ascii=False).encode("gbk"),
        headers={"Content-Type": "application/json"},
    )


def sent_body(route) -> dict:
    """Decode the JSON body of the last request sent to a route."""
    return json.loads(route.calls.last.request.content.decode("gbk"))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real credentials from the environment out of tests."""
    for name in (
        "AIP_APP_ID",
        "AIP_API_KEY",
        "AIP_SECRET_KEY",
        "AIP_NLP_URL",
        "AIP_NLP_TIMEOUT",
        "AIP_NLP_CONNECT_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def aip_mock():
    """Mocked AIP server with a working token endpoint."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as mock:
        mock.post(path="/oauth/2.0/token", name="token").mock(
            return_value=httpx.Response(200, json={"access_token": TOKEN, "expires_in": 2592000})
        )
        yield mock


@pytest.fixture
def nlp():
    """NLP client pointed at the mocked server."""
    with AipNlp("app-id", "api-key", "secret-key", url=BASE_URL) as client:
        yield client
