from pydantic import BaseModel, ConfigDict, Field


class TitleSuggestion(BaseModel):
    title: str
    score: float


class ABTestTitle(BaseModel):
    """One A/B test title variant with its expected click-through score."""

    title: str
    style: str = ""
    ctr_score: float = 0
    target_audience: str = ""
    reasoning: str = ""


class SEOTitleCheck(BaseModel):
    length: int
    optimal: bool
    suggestion: str = ""


class SEOContentCheck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    word_count: int = Field(alias="wordCount")
    readability: str


class SEOAnalysis(BaseModel):
    score: float
    title: SEOTitleCheck
    content: SEOContentCheck
    improvements: list[str] = Field(default_factory=list)


class ToneResult(BaseModel):
    original: str
    tone: str
    result: str


class FactCheckClaim(BaseModel):
    claim: str
    status: str = "needs_verification"  # verified | needs_verification | false
    explanation: str = ""
    sources: list[str] = Field(default_factory=list)


class FactCheckReport(BaseModel):
    claims: list[FactCheckClaim] = Field(default_factory=list)
    overall_reliability: str = "medium"  # high | medium | low
    raw_response: str | None = None


class ChatMessage(BaseModel):
    role: str = "user"  # user | assistant
    content: str | None = None
    text: str | None = None

    @property
    def body(self) -> str:
        return self.content or self.text or ""


class ChatReply(BaseModel):
    message: str
    model: str


class TagSuggestion(BaseModel):
    tags: list[str] = Field(default_factory=list)
    category: str = ""


class KeywordStat(BaseModel):
    keyword: str
    count: int = 0
    density: float = 0


class ContentInsights(BaseModel):
    """AI half of a content analysis."""

    readability_score: float = 75
    top_keywords: list[KeywordStat] = Field(default_factory=list)
    quality_score: float = 70
    suggestions: list[str] = Field(default_factory=list)


class ContentAnalysis(ContentInsights):
    word_count: int
    sentence_count: int
    paragraph_count: int
    avg_sentence_length: float
    avg_word_length: float
