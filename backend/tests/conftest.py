import sys
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

# Ensure backend package is importable
backend_root = Path(__file__).resolve().parents[1]
if str(backend_root) not in sys.path:
    sys.path.insert(0, str(backend_root))


class FakeWeb:
    """Canned pages served to the scrapers in place of the network."""

    def __init__(self):
        self.pages = {}
        self.requests = []

    def add(self, url: str, html: str = "", status: int = 200):
        self.pages[url] = (status, html)

    def fail(self, url: str, exc: Exception):
        self.pages[url] = exc

    def respond(self, url: str, timeout=None) -> httpx.Response:
        self.requests.append((url, timeout))
        request = httpx.Request("GET", url)
        page = self.pages.get(url)
        if page is None:
            raise httpx.ConnectError(f"Name or service not known: {url}", request=request)
        if isinstance(page, Exception):
            raise page
        status, html = page
        return httpx.Response(status, text=html, request=request)

    def timeout_for(self, url: str):
        return next(t for u, t in self.requests if u == url)


@pytest.fixture
def fake_web(monkeypatch):
    """Swap httpx.AsyncClient for a client that serves FakeWeb pages."""
    web = FakeWeb()

    class FakeAsyncClient:
        def __init__(self, *args, **kwargs):
            self.headers = kwargs.get("headers") or {}

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def get(self, url, timeout=None, headers=None):
            return web.respond(url, timeout)

    monkeypatch.setattr(httpx, "AsyncClient", FakeAsyncClient)
    return web


class FakeAIService:
    """Deterministic stand-in for the generation service."""

    def __init__(self, cover_letter="Cover letter text", bullets="• Bullet one\n• Bullet two",
                 cover_error=None, bullets_error=None, configured=True):
        self.cover_letter = cover_letter
        self.bullets = bullets
        self.cover_error = cover_error
        self.bullets_error = bullets_error
        self.is_configured = configured
        self.calls = []

    async def generate_cover_letter(self, resume_text, job_description, company_info, role_title, company_name):
        self.calls.append(("cover_letter", resume_text, job_description, company_info, role_title, company_name))
        if self.cover_error:
            raise self.cover_error
        return self.cover_letter

    async def generate_resume_bullets(self, resume_text, job_description, company_info, role_title, company_name):
        self.calls.append(("bullets", resume_text, job_description, company_info, role_title, company_name))
        if self.bullets_error:
            raise self.bullets_error
        return self.bullets

    async def analyze_company(self, company_info, company_name):
        self.calls.append(("analysis", company_info, company_name))
        return f"Summary of {company_name}"


@pytest.fixture
def client(monkeypatch, tmp_path):
    """Provide a FastAPI TestClient with a fresh session store and no real API keys."""
    monkeypatch.setenv("CORS_ORIGINS", "*")
    monkeypatch.setenv("PUBLIC_DIR", str(tmp_path / "public"))
    # Avoid accidental usage of real API keys during tests
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.delenv("RESUME_PROFILE_PATH", raising=False)

    from coverletter.main import app
    from coverletter.sessions import SessionStore

    app.state.session_store = SessionStore()
    yield TestClient(app)
    app.dependency_overrides.clear()
