"""Run one prompt through every configured model and compare the answers.

Each model gets exactly one attempt on its own adapter: no strategy, no
fallback, so a failing model shows up as ERROR.

Usage: python scripts/compare_models.py "Write a blog intro about cold brew"
"""

import asyncio
import os
import sys
import time
from collections.abc import Mapping

# Load .env BEFORE importing anything else (override system env vars)
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from dotenv import load_dotenv

load_dotenv(os.path.join(ROOT, ".env"), override=True)

from src.core.config import settings
from src.core.llm.clients import TextAdapter, build_adapters
from src.core.llm.router import MODEL_CATALOG, ModelDescriptor

DEFAULT_PROMPT = "Write a two-sentence introduction for a blog post about home coffee brewing."


async def ask(adapter: TextAdapter, model: ModelDescriptor, prompt: str) -> tuple[str, float]:
    start = time.time()
    text = await asyncio.wait_for(
        adapter.generate(prompt, model.model_id), timeout=settings.llm_timeout_seconds
    )
    return text, time.time() - start


async def compare(prompt: str, adapters: Mapping[str, TextAdapter] | None = None) -> None:
    adapters = adapters if adapters is not None else build_adapters(settings)
    models = [
        m for m in MODEL_CATALOG.values()
        if m.provider in adapters and adapters[m.provider].available
    ]
    if not models:
        print("No API keys configured. Set GOOGLE_AI_API_KEY, OPENAI_API_KEY or ANTHROPIC_API_KEY.")
        return

    print(f"\n{'='*70}")
    print(f"PROMPT: {prompt}")
    print(f"{'='*70}")

    results = await asyncio.gather(
        *(ask(adapters[m.provider], m, prompt) for m in models),
        return_exceptions=True,
    )
    for model, result in zip(models, results):
        print(f"\n--- {model.name} (${model.cost}/1M tokens, {model.speed}) ---")
        if isinstance(result, Exception):
            print(f"ERROR: {result!r}")
            continue
        text, elapsed = result
        print(f"[{elapsed:.2f}s] {text}")


if __name__ == "__main__":
    asyncio.run(compare(" ".join(sys.argv[1:]) or DEFAULT_PROMPT))
