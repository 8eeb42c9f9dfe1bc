from src.core.llm.router import MultiModelRouter, TaskType
from src.core.llm.structured import parse_or_default
from src.core.observability import observe
from src.core.schemas.writing import SEOAnalysis, SEOContentCheck, SEOTitleCheck
from src.core.writing.prompts import SEO_ANALYSIS_PROMPT, SEO_CONTENT_LIMIT
from src.core.writing.titles import SEO_MODEL

OPTIMAL_TITLE_LENGTH = (50, 60)


def default_analysis(title: str, content: str) -> SEOAnalysis:
    """Heuristic analysis used when the model output can't be parsed."""
    low, high = OPTIMAL_TITLE_LENGTH
    return SEOAnalysis(
        score=75,
        title=SEOTitleCheck(length=len(title), optimal=low <= len(title) <= high),
        content=SEOContentCheck(word_count=len(content.split(" ")), readability="average"),
        improvements=["Add a meta description", "Optimize image alt text"],
    )


@observe(name="analyze_seo")
async def analyze_seo(router: MultiModelRouter, title: str, content: str) -> SEOAnalysis:
    prompt = SEO_ANALYSIS_PROMPT.format(title=title, content=content[:SEO_CONTENT_LIMIT])
    result = await router.generate(prompt, TaskType.SEO, SEO_MODEL)
    return parse_or_default(result, "object", SEOAnalysis, default_analysis(title, content))
