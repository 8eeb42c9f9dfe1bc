"""Blog title suggestions: SEO titles and A/B test variants."""

from src.core.llm.router import MultiModelRouter, TaskType
from src.core.llm.structured import parse_or_default
from src.core.observability import observe
from src.core.schemas.writing import ABTestTitle, TitleSuggestion
from src.core.writing.prompts import AB_TEST_TITLES_PROMPT, TITLES_PROMPT, keywords_line

# Title and SEO work always uses the top-quality model, whatever the strategy
SEO_MODEL = "gemini-pro"


def default_titles(topic: str) -> list[TitleSuggestion]:
    return [
        TitleSuggestion(title=f"{topic}: The Complete 2025 Guide", score=90),
        TitleSuggestion(title=f"{topic} for Beginners: Practical Tips That Work", score=85),
    ]


def default_ab_test_titles(topic: str) -> list[ABTestTitle]:
    return [
        ABTestTitle(
            title=f"The Complete Guide to Getting Started with {topic}",
            style="guide",
            ctr_score=75,
            target_audience="beginners",
            reasoning="Comprehensive and approachable",
        )
    ]


@observe(name="generate_titles")
async def generate_titles(
    router: MultiModelRouter,
    topic: str,
    keywords: list[str] | None = None,
) -> list[TitleSuggestion]:
    """Suggest SEO-optimized titles with a score each.

    Falls back to two stock titles when the model output holds no usable
    JSON array.
    """
    prompt = TITLES_PROMPT.format(topic=topic, keywords_line=keywords_line(keywords))
    result = await router.generate(prompt, TaskType.SEO, SEO_MODEL)
    return parse_or_default(result, "array", list[TitleSuggestion], default_titles(topic))


@observe(name="generate_ab_test_titles")
async def generate_ab_test_titles(
    router: MultiModelRouter,
    topic: str,
    keywords: list[str] | None = None,
    count: int = 5,
) -> list[ABTestTitle]:
    prompt = AB_TEST_TITLES_PROMPT.format(
        topic=topic, keywords_line=keywords_line(keywords), count=count
    )
    result = await router.generate(prompt, TaskType.CREATIVE)
    return parse_or_default(result, "array", list[ABTestTitle], default_ab_test_titles(topic))
