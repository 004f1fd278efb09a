from datetime import date
from types import SimpleNamespace

import pytest


class FakeMessages:
    def __init__(self, reply=None, error=None, content=None):
        self.reply = reply
        self.error = error
        self.content = content
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return SimpleNamespace(content=self.content)
        return SimpleNamespace(content=[SimpleNamespace(type="text", text=self.reply)])


class FakeClient:
    def __init__(self, reply=None, error=None, content=None):
        self.messages = FakeMessages(reply=reply, error=error, content=content)


@pytest.fixture
def party():
    return {
        "disclosing_party": "Acme Inc.",
        "receiving_party": "John Doe",
        "effective_date": date(2024, 1, 15),
    }


@pytest.fixture
def fake_client():
    return FakeClient
