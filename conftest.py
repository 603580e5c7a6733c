import json
from typing import Optional

import pytest
import requests

from material_proxy.config import Settings

PET_ANSWER = {
    "material": "PET",
    "grade": "PET-G",
    "advantages": ["low cost"],
    "disadvantages": ["limited heat resistance"],
}


def make_response(status: int, payload=None, text: Optional[str] = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    if text is None:
        text = json.dumps(payload)
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    return resp


def envelope(answer_text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": answer_text}]}}]}


class FakePost:
    """Stands in for requests.post and records each call."""

    def __init__(self, response=None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", timeout_seconds=5.0)


@pytest.fixture
def pet_post() -> FakePost:
    return FakePost(make_response(200, envelope(json.dumps(PET_ANSWER))))
