"""Post metadata and content analysis: hashtags, tags, readability stats."""

import re

from src.core.llm.router import MultiModelRouter, TaskType
from src.core.llm.structured import parse_or_default
from src.core.observability import observe
from src.core.schemas.writing import ContentAnalysis, ContentInsights, TagSuggestion
from src.core.writing.prompts import (
    ANALYSIS_CONTENT_LIMIT,
    CONTENT_ANALYSIS_PROMPT,
    HASHTAGS_CONTENT_LIMIT,
    HASHTAGS_PROMPT,
    TAGS_CONTENT_LIMIT,
    TAGS_PROMPT,
)

DEFAULT_HASHTAGS = ["#blog", "#content"]

_SENTENCE_END = re.compile(r"[.!?]+")
_PARAGRAPH_BREAK = re.compile(r"\n\n+")


def default_tags() -> TagSuggestion:
    return TagSuggestion(tags=["general"], category="blog")


def default_insights() -> ContentInsights:
    return ContentInsights(
        readability_score=75,
        top_keywords=[],
        quality_score=70,
        suggestions=["Add more examples", "Improve paragraph structure", "Insert images"],
    )


def content_stats(content: str) -> dict[str, int | float]:
    """Word, sentence and paragraph counts with averages rounded to one decimal."""
    words = content.split()
    sentences = [s for s in _SENTENCE_END.split(content) if s.strip()]
    paragraphs = [p for p in _PARAGRAPH_BREAK.split(content) if p.strip()]

    word_count = len(words)
    avg_sentence = word_count / len(sentences) if sentences else 0
    avg_word = sum(len(w) for w in words) / (word_count or 1)
    return {
        "word_count": word_count,
        "sentence_count": len(sentences),
        "paragraph_count": len(paragraphs),
        "avg_sentence_length": round(avg_sentence, 1),
        "avg_word_length": round(avg_word, 1),
    }


@observe(name="generate_hashtags")
async def generate_hashtags(
    router: MultiModelRouter,
    title: str,
    content: str,
    count: int = 10,
) -> list[str]:
    prompt = HASHTAGS_PROMPT.format(
        count=count, title=title, content=content[:HASHTAGS_CONTENT_LIMIT]
    )
    result = await router.generate(prompt, TaskType.SIMPLE)
    return parse_or_default(result, "array", list[str], list(DEFAULT_HASHTAGS))


@observe(name="suggest_tags")
async def suggest_tags(router: MultiModelRouter, title: str, content: str) -> TagSuggestion:
    prompt = TAGS_PROMPT.format(title=title, content=content[:TAGS_CONTENT_LIMIT])
    result = await router.generate(prompt, TaskType.SIMPLE)
    return parse_or_default(result, "object", TagSuggestion, default_tags())


@observe(name="analyze_content")
async def analyze_content(
    router: MultiModelRouter,
    content: str,
    title: str | None = None,
) -> ContentAnalysis:
    """Local text statistics merged with the model's quality review.

    The statistics are always computed here. The review falls back to
    fixed scores and suggestions when the model output can't be parsed.
    """
    prompt = CONTENT_ANALYSIS_PROMPT.format(
        title=title or "(untitled)", content=content[:ANALYSIS_CONTENT_LIMIT]
    )
    result = await router.generate(prompt, TaskType.ANALYSIS)
    insights = parse_or_default(result, "object", ContentInsights, default_insights())
    return ContentAnalysis(**content_stats(content), **insights.model_dump())
