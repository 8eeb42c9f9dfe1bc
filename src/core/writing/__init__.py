from src.core.writing.chat import chat
from src.core.writing.content import analyze_content, generate_hashtags, suggest_tags
from src.core.writing.editing import change_tone, fact_check
from src.core.writing.seo import analyze_seo
from src.core.writing.titles import generate_ab_test_titles, generate_titles

__all__ = [
    "analyze_content",
    "analyze_seo",
    "change_tone",
    "chat",
    "fact_check",
    "generate_ab_test_titles",
    "generate_hashtags",
    "generate_titles",
    "suggest_tags",
]
