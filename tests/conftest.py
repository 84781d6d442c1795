import base64
import io
import json
import re
from types import SimpleNamespace

import httpx
import openai
import pytest
from PIL import Image

from whisperer import generator


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    """Stands in for openai.OpenAI; only chat.completions.create is used."""

    def __init__(self, content=None, error=None):
        self.completions = FakeCompletions(content=content, error=error)
        self.chat = SimpleNamespace(completions=self.completions)


def variants_body(*variants):
    return json.dumps({"variants": list(variants)})


def connection_error():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    return openai.APIConnectionError(request=request)


def count_sentences(text):
    return len(re.findall(r"[.!?](?=\s|$)", text))


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.delenv("OPENAI_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("OPENAI_MODEL", raising=False)


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


@pytest.fixture
def install_openai(monkeypatch, api_key):
    """Route generator.get_client() to a FakeOpenAI built from the given response."""

    def _install(content=None, error=None):
        fake = FakeOpenAI(content=content, error=error)
        monkeypatch.setattr(generator, "OpenAI", lambda **kwargs: fake)
        return fake

    return _install


@pytest.fixture
def png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 30, 30)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_data_url(png_bytes):
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")


@pytest.fixture
def invoice_payload():
    return {
        "feature": "bulk invoice export",
        "problem": "users must export invoices one at a time",
        "outcome": "speed",
        "length": "standard",
    }
