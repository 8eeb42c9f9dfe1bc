"""Multi-model text generation router.

Picks one backend per call from a fixed catalog, either from the task type
(``smart`` strategy) or from a process-wide strategy, and retries once on
the cheap fallback model when the chosen backend fails.
"""

import asyncio
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum

from src.core.config import Settings, settings
from src.core.exceptions import ConfigurationError, GenerationError
from src.core.llm.clients import TextAdapter, build_adapters
from src.core.observability import observe

logger = logging.getLogger(__name__)


class Provider(StrEnum):
    GOOGLE = "google"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


class Speed(StrEnum):
    FAST = "fast"
    MEDIUM = "medium"
    SLOW = "slow"


class Quality(StrEnum):
    GOOD = "good"
    EXCELLENT = "excellent"
    BEST = "best"


class RoutingStrategy(StrEnum):
    SMART = "smart"
    COST = "cost"
    QUALITY = "quality"
    SPEED = "speed"

    @classmethod
    def _missing_(cls, value):
        # Accept the long form, e.g. "cost-optimized"
        if isinstance(value, str) and value.endswith("-optimized"):
            return cls(value.removesuffix("-optimized"))
        return None


class TaskType(StrEnum):
    SIMPLE = "simple"
    CREATIVE = "creative"
    COMPLEX = "complex"
    SEO = "seo"
    ANALYSIS = "analysis"


@dataclass(frozen=True)
class ModelDescriptor:
    id: str
    name: str
    provider: Provider
    model_id: str  # provider-side model name
    cost: float  # $ per 1M tokens
    speed: Speed
    quality: Quality


MODEL_CATALOG: dict[str, ModelDescriptor] = {
    d.id: d
    for d in (
        ModelDescriptor(
            "gemini-flash", "Gemini 2.5 Flash", Provider.GOOGLE, "gemini-2.5-flash",
            0.19, Speed.FAST, Quality.EXCELLENT,
        ),
        ModelDescriptor(
            "gemini-pro", "Gemini 2.5 Pro", Provider.GOOGLE, "gemini-2.5-pro",
            3.75, Speed.MEDIUM, Quality.BEST,
        ),
        ModelDescriptor(
            "gpt-4o-mini", "GPT-4o Mini", Provider.OPENAI, "gpt-4o-mini",
            0.38, Speed.FAST, Quality.EXCELLENT,
        ),
        ModelDescriptor(
            "gpt-4o", "GPT-4o", Provider.OPENAI, "gpt-4o",
            6.38, Speed.MEDIUM, Quality.BEST,
        ),
        ModelDescriptor(
            "claude-sonnet", "Claude 3.5 Sonnet", Provider.ANTHROPIC,
            "claude-3-5-sonnet-20241022", 9.45, Speed.MEDIUM, Quality.BEST,
        ),
        ModelDescriptor(
            "claude-haiku", "Claude 3 Haiku", Provider.ANTHROPIC,
            "claude-3-haiku-20240307", 0.63, Speed.FAST, Quality.GOOD,
        ),
    )
}


def cheapest(models: Iterable[ModelDescriptor]) -> str:
    """Id of the lowest-cost model; ties go to the alphabetically first id."""
    return min(models, key=lambda m: (m.cost, m.id)).id


# Best-quality models ordered by track record, strongest first
QUALITY_RANKING: tuple[str, ...] = ("claude-sonnet", "gpt-4o", "gemini-pro")

CHEAPEST_MODEL = cheapest(MODEL_CATALOG.values())
FASTEST_MODEL = cheapest(m for m in MODEL_CATALOG.values() if m.speed == Speed.FAST)
FLAGSHIP_MODEL = QUALITY_RANKING[0]
FALLBACK_MODEL = CHEAPEST_MODEL

# Task → model mapping for the smart strategy
SMART_ROUTES: dict[str, str] = {
    TaskType.SIMPLE: FASTEST_MODEL,
    TaskType.CREATIVE: "gpt-4o-mini",
    TaskType.COMPLEX: "gemini-pro",
    TaskType.SEO: "gemini-pro",
    TaskType.ANALYSIS: "gemini-pro",
}


def select_model(strategy: RoutingStrategy | str, task_type: TaskType | str | None) -> str:
    """Pick a model id for a task. Pure: no I/O, no state, no randomness."""
    strategy = RoutingStrategy(strategy)
    if strategy is RoutingStrategy.COST:
        return CHEAPEST_MODEL
    if strategy is RoutingStrategy.QUALITY:
        return FLAGSHIP_MODEL
    if strategy is RoutingStrategy.SPEED:
        return FASTEST_MODEL
    return SMART_ROUTES.get(task_type, SMART_ROUTES[TaskType.SIMPLE])


class MultiModelRouter:
    """Routes generation calls to provider adapters with one-step fallback.

    Holds only read-only configuration, so one instance can serve
    concurrent callers. Build it once at startup and pass it around.
    """

    def __init__(
        self,
        strategy: RoutingStrategy | str = RoutingStrategy.SMART,
        adapters: Mapping[str, TextAdapter] | None = None,
        timeout: float | None = 30.0,
    ):
        self.strategy = RoutingStrategy(strategy)
        self.timeout = timeout
        self._adapters = dict(adapters or {})

    @property
    def available_providers(self) -> list[str]:
        return [name for name, a in self._adapters.items() if a.available]

    def select_model(self, task_type: TaskType | str | None) -> str:
        return select_model(self.strategy, task_type)

    @observe(name="llm_generate")
    async def generate_with_model(
        self,
        prompt: str,
        task_type: TaskType | str | None = TaskType.SIMPLE,
        model: str | None = None,
    ) -> tuple[str, str]:
        """Generate text for ``prompt`` and report which model produced it.

        An explicit ``model`` bypasses strategy selection. Returns
        ``(text, model id)``, where the id is the fallback model when the
        first choice failed. Raises ConfigurationError when the chosen
        backend has no key, and GenerationError when the backend and the
        fallback both fail.
        """
        selected = model or self.select_model(task_type)
        if selected not in MODEL_CATALOG:
            raise ValueError(f"Unknown model: {selected}")

        logger.info("Using model %s (task=%s)", MODEL_CATALOG[selected].name, task_type)

        try:
            return await self._call(selected, prompt), selected
        except ConfigurationError:
            raise
        except Exception as e:
            logger.warning("Model %s failed: %s", selected, e)
            if selected == FALLBACK_MODEL:
                raise GenerationError(f"{selected} generation failed: {e}", model=selected) from e

        logger.info("Falling back to %s", MODEL_CATALOG[FALLBACK_MODEL].name)
        try:
            return await self._call(FALLBACK_MODEL, prompt), FALLBACK_MODEL
        except Exception as e:
            logger.error("Fallback model %s also failed: %s", FALLBACK_MODEL, e)
            raise GenerationError(
                f"{selected} failed and fallback {FALLBACK_MODEL} failed: {e}",
                model=FALLBACK_MODEL,
            ) from e

    async def generate(
        self,
        prompt: str,
        task_type: TaskType | str | None = TaskType.SIMPLE,
        model: str | None = None,
    ) -> str:
        """Generate text for ``prompt``; see ``generate_with_model``."""
        text, _ = await self.generate_with_model(prompt, task_type, model)
        return text

    async def _call(self, model: str, prompt: str) -> str:
        descriptor = MODEL_CATALOG[model]
        adapter = self._adapters.get(descriptor.provider)
        if adapter is None or not adapter.available:
            raise ConfigurationError(f"{descriptor.provider} API key not configured")

        call = adapter.generate(prompt, descriptor.model_id)
        if self.timeout is None:
            return await call
        return await asyncio.wait_for(call, timeout=self.timeout)


def build_router(cfg: Settings | None = None) -> MultiModelRouter:
    """Construct the process-wide router from settings."""
    cfg = cfg or settings
    router = MultiModelRouter(
        strategy=cfg.llm_routing_strategy,
        adapters=build_adapters(cfg),
        timeout=cfg.llm_timeout_seconds,
    )
    logger.info(
        "LLM router ready: strategy=%s, providers=%s",
        router.strategy,
        router.available_providers or "none",
    )
    return router
