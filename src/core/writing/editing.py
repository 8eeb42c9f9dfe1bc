"""Editor helpers: tone rewriting and fact checking."""

from src.core.llm.router import MultiModelRouter, TaskType
from src.core.llm.structured import parse_or_default
from src.core.observability import observe
from src.core.schemas.writing import FactCheckReport, ToneResult
from src.core.writing.prompts import (
    DEFAULT_TONE,
    FACT_CHECK_PROMPT,
    TONE_DESCRIPTIONS,
    TONE_PROMPT,
)


@observe(name="change_tone")
async def change_tone(
    router: MultiModelRouter,
    text: str,
    tone: str | None = None,
) -> ToneResult:
    """Rewrite ``text`` in another tone. Unknown tones use the professional one."""
    selected = tone or DEFAULT_TONE
    description = TONE_DESCRIPTIONS.get(selected, TONE_DESCRIPTIONS[DEFAULT_TONE])
    prompt = TONE_PROMPT.format(tone_description=description, text=text)
    result = await router.generate(prompt, TaskType.CREATIVE)
    return ToneResult(original=text, tone=selected, result=result.strip())


@observe(name="fact_check")
async def fact_check(router: MultiModelRouter, text: str) -> FactCheckReport:
    """Verify the claims in ``text``.

    Without a usable JSON object the report is empty with medium
    reliability, and the raw model text is kept for the editor.
    """
    result = await router.generate(FACT_CHECK_PROMPT.format(text=text), TaskType.ANALYSIS)
    default = FactCheckReport(claims=[], overall_reliability="medium", raw_response=result)
    return parse_or_default(result, "object", FactCheckReport, default)
