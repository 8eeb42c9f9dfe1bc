"""Test fixtures for Blog AI Studio."""

import asyncio
import os

import pytest

# Set test environment before importing app modules
os.environ.setdefault("APP_ENV", "testing")
os.environ["LANGFUSE_PUBLIC_KEY"] = ""

from src.core.llm.router import MultiModelRouter


class FakeAdapter:
    """In-memory provider adapter. Queued exceptions are raised, strings returned."""

    def __init__(self, provider: str, responses=None, available: bool = True, delay: float = 0):
        self.provider = provider
        self.available = available
        self.responses = list(responses or [])
        self.delay = delay
        self.calls: list[tuple[str, str]] = []

    async def generate(self, prompt: str, model_id: str) -> str:
        self.calls.append((prompt, model_id))
        if self.delay:
            await asyncio.sleep(self.delay)
        result = self.responses.pop(0) if self.responses else f"text from {model_id}"
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture
def google():
    return FakeAdapter("google")


@pytest.fixture
def openai():
    return FakeAdapter("openai")


@pytest.fixture
def anthropic():
    return FakeAdapter("anthropic")


@pytest.fixture
def adapters(google, openai, anthropic):
    return {a.provider: a for a in (google, openai, anthropic)}


@pytest.fixture
def llm_router(adapters):
    """Smart-strategy router wired to fake adapters for every provider."""
    return MultiModelRouter(strategy="smart", adapters=adapters, timeout=5)


@pytest.fixture
def make_adapter():
    """Factory for extra fake adapters (unavailable providers, slow backends)."""
    return FakeAdapter
