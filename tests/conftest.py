"""Shared fixtures for PrintShopWeb tests."""

from io import BytesIO

import pytest
from pypdf import PdfWriter

from app import create_app
from services.kv_store import InMemoryKeyValueStore


def make_pdf(pages: int) -> bytes:
    """Build a blank PDF with the given number of pages."""
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=595, height=842)
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


# Fixtures

@pytest.fixture
def store():
    """Fresh in-memory key-value store."""
    return InMemoryKeyValueStore(namespace="test")


@pytest.fixture
def app(store):
    """Flask app wired to the in-memory store."""
    app = create_app("config.TestingConfig", store=store)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def pdf_bytes():
    """Ten-page PDF."""
    return make_pdf(10)


@pytest.fixture
def pdf_factory():
    """Callable building a blank PDF with N pages."""
    return make_pdf
