TITLES_PROMPT = """Topic: {topic}
{keywords_line}

Generate 5 SEO-optimized blog titles as JSON.
Each title should be 50-60 characters long and compelling enough to earn the click.

JSON format:
[
  {{"title": "Title 1", "score": 95}},
  {{"title": "Title 2", "score": 90}}
]

Return only the JSON:"""

AB_TEST_TITLES_PROMPT = """Topic: {topic}
{keywords_line}

Generate {count} blog titles for an A/B test.
Give each title a different style and angle:
1. Question
2. Number / list
3. Curiosity gap
4. Problem-solving
5. Trend / what's new

For each title provide the expected click-through score (0-100) and the target audience as JSON.

JSON format:
[
  {{
    "title": "Title",
    "style": "question",
    "ctr_score": 85,
    "target_audience": "beginners",
    "reasoning": "Why this title works"
  }}
]

Return only the JSON:"""

SEO_ANALYSIS_PROMPT = """Analyze the SEO of the following blog post.

Title: {title}
Content: {content}

Return the result in this JSON format:
{{
  "score": 85,
  "title": {{"length": 50, "optimal": true, "suggestion": ""}},
  "content": {{"wordCount": 500, "readability": "good"}},
  "improvements": ["Improvement 1", "Improvement 2"]
}}"""

TONE_PROMPT = """Rewrite the following text in a {tone_description} tone. \
Keep the meaning; change only the tone.

Original:
{text}

Rewritten in a {tone_description} tone:"""

FACT_CHECK_PROMPT = """Find the claims in the following text that need fact-checking and verify them. \
Return the result as JSON.

Text:
{text}

Return this JSON format:
{{
  "claims": [
    {{
      "claim": "The claim",
      "status": "verified" | "needs_verification" | "false",
      "explanation": "Explanation",
      "sources": ["Source 1", "Source 2"]
    }}
  ],
  "overall_reliability": "high" | "medium" | "low"
}}

Return only the JSON:"""

HASHTAGS_PROMPT = """Generate {count} hashtags for the following blog post:

Title: {title}
Content: {content}

Return a JSON array: ["#hashtag1", "#hashtag2"]"""

TAGS_PROMPT = """Suggest tags and a category for the following blog post:

Title: {title}
Content: {content}

Return this JSON format:
{{
  "tags": ["tag1", "tag2", "tag3"],
  "category": "Suggested category"
}}"""

CONTENT_ANALYSIS_PROMPT = """Analyze the following blog content:

Title: {title}
Content: {content}...

Return the analysis as JSON:
1. Readability score (0-100)
2. Top 5 keywords with their counts
3. Content quality score (0-100)
4. Three suggestions for improvement

JSON format:
{{
  "readability_score": 85,
  "top_keywords": [{{"keyword": "AI", "count": 10, "density": 2.5}}],
  "quality_score": 90,
  "suggestions": ["Suggestion 1", "Suggestion 2", "Suggestion 3"]
}}

Return only the JSON:"""

TONE_DESCRIPTIONS: dict[str, str] = {
    "professional": "professional, polished",
    "friendly": "friendly, relaxed",
    "creative": "creative, distinctive",
    "academic": "academic, precise",
    "casual": "casual, natural",
    "formal": "formal, strict",
}
DEFAULT_TONE = "professional"

# Content beyond these lengths is cut from the prompt
SEO_CONTENT_LIMIT = 1000
HASHTAGS_CONTENT_LIMIT = 500
TAGS_CONTENT_LIMIT = 1000
ANALYSIS_CONTENT_LIMIT = 2000


def keywords_line(keywords: list[str] | None) -> str:
    return f"Keywords: {', '.join(keywords)}" if keywords else ""
