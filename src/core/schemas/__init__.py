from src.core.schemas.writing import (
    ABTestTitle,
    ChatMessage,
    ChatReply,
    ContentAnalysis,
    ContentInsights,
    FactCheckClaim,
    FactCheckReport,
    KeywordStat,
    SEOAnalysis,
    SEOContentCheck,
    SEOTitleCheck,
    TagSuggestion,
    TitleSuggestion,
    ToneResult,
)

__all__ = [
    "ABTestTitle",
    "ChatMessage",
    "ChatReply",
    "ContentAnalysis",
    "ContentInsights",
    "FactCheckClaim",
    "FactCheckReport",
    "KeywordStat",
    "SEOAnalysis",
    "SEOContentCheck",
    "SEOTitleCheck",
    "TagSuggestion",
    "TitleSuggestion",
    "ToneResult",
]
