"""Tests for the provider adapters (response envelope extraction, missing keys)."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.core.config import Settings
from src.core.exceptions import ConfigurationError
from src.core.llm.clients import (
    CLAUDE_MAX_TOKENS,
    ClaudeAdapter,
    GeminiAdapter,
    OpenAIAdapter,
    build_adapters,
)


def _openai_completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.mark.asyncio
async def test_gemini_returns_response_text():
    adapter = GeminiAdapter("test-key")
    mock_client = MagicMock()
    mock_client.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text="hello"))

    with patch.object(adapter, "client", return_value=mock_client):
        result = await adapter.generate("prompt", "gemini-2.5-flash")

    assert result == "hello"
    call_kwargs = mock_client.aio.models.generate_content.call_args.kwargs
    assert call_kwargs == {"model": "gemini-2.5-flash", "contents": "prompt"}


@pytest.mark.asyncio
async def test_gemini_none_text_becomes_empty():
    adapter = GeminiAdapter("test-key")
    mock_client = MagicMock()
    mock_client.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text=None))

    with patch.object(adapter, "client", return_value=mock_client):
        assert await adapter.generate("prompt", "gemini-2.5-pro") == ""


@pytest.mark.asyncio
async def test_openai_returns_first_choice_content():
    adapter = OpenAIAdapter("test-key")
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock(return_value=_openai_completion("draft"))

    with patch.object(adapter, "client", return_value=mock_client):
        result = await adapter.generate("prompt", "gpt-4o-mini")

    assert result == "draft"
    call_kwargs = mock_client.chat.completions.create.call_args.kwargs
    assert call_kwargs["model"] == "gpt-4o-mini"
    assert call_kwargs["messages"] == [{"role": "user", "content": "prompt"}]


@pytest.mark.asyncio
async def test_openai_null_content_becomes_empty():
    adapter = OpenAIAdapter("test-key")
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock(return_value=_openai_completion(None))

    with patch.object(adapter, "client", return_value=mock_client):
        assert await adapter.generate("prompt", "gpt-4o") == ""


@pytest.mark.asyncio
async def test_openai_malformed_envelope_raises():
    adapter = OpenAIAdapter("test-key")
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock(return_value=SimpleNamespace(choices=[]))

    with patch.object(adapter, "client", return_value=mock_client):
        with pytest.raises(IndexError):
            await adapter.generate("prompt", "gpt-4o")


@pytest.mark.asyncio
async def test_claude_returns_first_text_block():
    adapter = ClaudeAdapter("test-key")
    mock_client = MagicMock()
    mock_client.messages.create = AsyncMock(
        return_value=SimpleNamespace(
            content=[
                SimpleNamespace(type="tool_use", name="search"),
                SimpleNamespace(type="text", text="answer"),
            ]
        )
    )

    with patch.object(adapter, "client", return_value=mock_client):
        result = await adapter.generate("prompt", "claude-3-haiku-20240307")

    assert result == "answer"
    call_kwargs = mock_client.messages.create.call_args.kwargs
    assert call_kwargs["max_tokens"] == CLAUDE_MAX_TOKENS
    assert call_kwargs["model"] == "claude-3-haiku-20240307"


@pytest.mark.asyncio
async def test_claude_without_text_block_returns_empty():
    adapter = ClaudeAdapter("test-key")
    mock_client = MagicMock()
    mock_client.messages.create = AsyncMock(return_value=SimpleNamespace(content=[]))

    with patch.object(adapter, "client", return_value=mock_client):
        assert await adapter.generate("prompt", "claude-3-haiku-20240307") == ""


@pytest.mark.asyncio
@pytest.mark.parametrize("adapter_cls", [GeminiAdapter, OpenAIAdapter, ClaudeAdapter])
async def test_missing_key_raises_configuration_error(adapter_cls):
    adapter = adapter_cls("")
    assert adapter.available is False
    with pytest.raises(ConfigurationError, match=adapter_cls.env_var):
        await adapter.generate("prompt", "any-model")


def test_sdk_clients_disable_builtin_retries():
    with patch("src.core.llm.clients.AsyncOpenAI") as mock_openai, patch(
        "src.core.llm.clients.AsyncAnthropic"
    ) as mock_anthropic:
        OpenAIAdapter("sk-test").client()
        ClaudeAdapter("sk-ant-test").client()

    mock_openai.assert_called_once_with(api_key="sk-test", max_retries=0)
    mock_anthropic.assert_called_once_with(api_key="sk-ant-test", max_retries=0)


def test_client_is_created_once():
    with patch("src.core.llm.clients.genai.Client") as mock_client_cls:
        adapter = GeminiAdapter("test-key")
        assert adapter.client() is adapter.client()
    mock_client_cls.assert_called_once_with(api_key="test-key")


def test_build_adapters_marks_availability_per_key():
    cfg = Settings(
        _env_file=None,
        google_ai_api_key="g-key",
        openai_api_key="",
        anthropic_api_key="a-key",
    )
    adapters = build_adapters(cfg)

    assert set(adapters) == {"google", "openai", "anthropic"}
    assert adapters["google"].available is True
    assert adapters["openai"].available is False
    assert adapters["anthropic"].available is True
