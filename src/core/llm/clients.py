"""Provider adapters, one per backend family.

Each adapter hides its SDK's request and response shape behind the same
``await adapter.generate(prompt, model_id) -> str`` call. SDK clients are
created lazily, so a missing key only fails when that family is used.
"""

from typing import Protocol

from anthropic import AsyncAnthropic
from google import genai
from openai import AsyncOpenAI

from src.core.config import Settings
from src.core.exceptions import ConfigurationError

CLAUDE_MAX_TOKENS = 4096


class TextAdapter(Protocol):
    """Interface shared by all provider adapters."""

    provider: str

    @property
    def available(self) -> bool: ...

    async def generate(self, prompt: str, model_id: str) -> str: ...


class _KeyedAdapter:
    provider: str = ""
    env_var: str = ""

    def __init__(self, api_key: str | None = None):
        self._api_key = api_key or None
        self._client = None

    @property
    def available(self) -> bool:
        return self._api_key is not None

    def _require_key(self) -> str:
        if self._api_key is None:
            raise ConfigurationError(
                f"{self.provider} API key not configured. Set {self.env_var} in .env "
                "or as an environment variable."
            )
        return self._api_key


class GeminiAdapter(_KeyedAdapter):
    provider = "google"
    env_var = "GOOGLE_AI_API_KEY"

    def client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self._require_key())
        return self._client

    async def generate(self, prompt: str, model_id: str) -> str:
        client = self.client()
        resp = await client.aio.models.generate_content(model=model_id, contents=prompt)
        return resp.text or ""


class OpenAIAdapter(_KeyedAdapter):
    provider = "openai"
    env_var = "OPENAI_API_KEY"

    def client(self) -> AsyncOpenAI:
        if self._client is None:
            # One request per call; the router owns the retry policy
            self._client = AsyncOpenAI(api_key=self._require_key(), max_retries=0)
        return self._client

    async def generate(self, prompt: str, model_id: str) -> str:
        client = self.client()
        resp = await client.chat.completions.create(
            model=model_id,
            messages=[{"role": "user", "content": prompt}],
        )
        return resp.choices[0].message.content or ""


class ClaudeAdapter(_KeyedAdapter):
    provider = "anthropic"
    env_var = "ANTHROPIC_API_KEY"

    def client(self) -> AsyncAnthropic:
        if self._client is None:
            self._client = AsyncAnthropic(api_key=self._require_key(), max_retries=0)
        return self._client

    async def generate(self, prompt: str, model_id: str) -> str:
        client = self.client()
        resp = await client.messages.create(
            model=model_id,
            max_tokens=CLAUDE_MAX_TOKENS,
            messages=[{"role": "user", "content": prompt}],
        )
        for block in resp.content:
            if block.type == "text":
                return block.text
        return ""


def build_adapters(cfg: Settings) -> dict[str, TextAdapter]:
    """Adapters for every provider family, keyed by provider name."""
    adapters: list[TextAdapter] = [
        GeminiAdapter(cfg.google_ai_api_key),
        OpenAIAdapter(cfg.openai_api_key),
        ClaudeAdapter(cfg.anthropic_api_key),
    ]
    return {a.provider: a for a in adapters}
