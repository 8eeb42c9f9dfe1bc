"""Writing-assistant chat over the multi-model router."""

from collections.abc import Sequence

from src.core.llm.router import MultiModelRouter, TaskType
from src.core.observability import observe
from src.core.schemas.writing import ChatMessage, ChatReply


def build_chat_prompt(messages: Sequence[ChatMessage]) -> str:
    """Fold the history into one prompt ending with the latest user turn.

    Earlier turns become ``User:`` / ``Assistant:`` lines. A single
    message is sent as-is.
    """
    if not messages:
        raise ValueError("messages must not be empty")
    prompt = messages[-1].body
    if not prompt:
        raise ValueError("No message content provided")

    history = "\n".join(
        f"{'User' if m.role == 'user' else 'Assistant'}: {m.body}" for m in messages[:-1]
    )
    return f"{history}\nUser: {prompt}\nAssistant:" if history else prompt


@observe(name="chat")
async def chat(
    router: MultiModelRouter,
    messages: Sequence[ChatMessage],
    model: str | None = None,
) -> ChatReply:
    prompt = build_chat_prompt(messages)
    text, served_by = await router.generate_with_model(prompt, TaskType.CREATIVE, model)
    return ChatReply(message=text, model=served_by)
