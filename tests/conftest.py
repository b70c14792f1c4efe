"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - gateway_config: Credentials and defaults for a fake provider
    - fake_openai: Recording stand-in for the chat-completions endpoint
    - completion_client: CompletionClient wired to fake_openai
    - api_app: FastAPI app with config and client overridden
    - async_client: HTTPX client for API testing
    - make_pdf / make_docx: Document builders
"""

import io
import json
from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
from docx import Document
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.api.dependencies import get_completion_client
from src.llm.client import CompletionClient
from src.llm.config import GatewayConfig, get_gateway_config

FAKE_USAGE = {"prompt_tokens": 12, "completion_tokens": 34, "total_tokens": 46}


def build_pdf(text: str = "") -> bytes:
    """Build a one-page PDF whose text layer is ``text`` (empty = scanned)."""
    stream = f"BT /F1 18 Tf 72 720 Td ({text}) Tj ET".encode("latin-1") if text else b""
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        b"/Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


def build_docx(paragraphs: list[str], table: list[list[str]] | None = None) -> bytes:
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    if table:
        grid = document.add_table(rows=len(table), cols=len(table[0]))
        for r, row in enumerate(table):
            for c, value in enumerate(row):
                grid.cell(r, c).text = value
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


class FakeOpenAI:
    """Records chat-completion requests and answers with a canned reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.reply = "**Section 420, IPC** applies."
        self.body: Any = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is not None:
            if isinstance(self.body, str):
                return httpx.Response(self.status_code, text=self.body)
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(
            self.status_code,
            json={
                "choices": [{"message": {"role": "assistant", "content": self.reply}}],
                "usage": FAKE_USAGE,
            },
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def payloads(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def make_pdf() -> Callable[[str], bytes]:
    return build_pdf


@pytest.fixture
def make_docx() -> Callable[..., bytes]:
    return build_docx


@pytest.fixture
def gateway_config() -> GatewayConfig:
    """Return a config pointing at the fake provider."""
    return GatewayConfig(
        api_key="sk-test-key",
        provider="openai",
        base_url="https://api.openai.test/v1",
        request_timeout=None,
    )


@pytest.fixture
def fake_openai() -> FakeOpenAI:
    return FakeOpenAI()


@pytest.fixture
def completion_client(gateway_config: GatewayConfig, fake_openai: FakeOpenAI) -> CompletionClient:
    return CompletionClient(gateway_config, transport=fake_openai.transport)


@pytest.fixture
def api_app(gateway_config: GatewayConfig, fake_openai: FakeOpenAI) -> FastAPI:
    """Create the app with configuration and provider client overridden."""
    app = create_app()
    app.dependency_overrides[get_gateway_config] = lambda: gateway_config
    app.dependency_overrides[get_completion_client] = lambda: CompletionClient(
        gateway_config, transport=fake_openai.transport
    )
    return app


@pytest.fixture
async def async_client(api_app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=api_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
