"""AI writing-assistant endpoints backed by the multi-model router."""

import logging

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ConfigDict, Field

from api.responses import (
    configuration_error,
    external_api_error,
    success_response,
    validation_error,
)
from src.core.config import settings
from src.core.exceptions import ConfigurationError, GenerationError
from src.core.llm.router import MODEL_CATALOG, MultiModelRouter, TaskType
from src.core.schemas.writing import ChatMessage
from src.core.writing import (
    analyze_content,
    analyze_seo,
    change_tone,
    chat,
    fact_check,
    generate_ab_test_titles,
    generate_hashtags,
    generate_titles,
    suggest_tags,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["ai"])


# --- Request schemas ---


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    prompt: str = Field(min_length=1)
    task_type: str | None = Field(default=TaskType.SIMPLE, alias="taskType")
    model: str | None = None


class TitlesRequest(BaseModel):
    topic: str = Field(min_length=1)
    keywords: list[str] | None = None


class ABTestTitlesRequest(TitlesRequest):
    count: int = Field(default=5, ge=1, le=10)


class ToneRequest(BaseModel):
    text: str = Field(min_length=1)
    tone: str | None = None


class FactCheckRequest(BaseModel):
    text: str = Field(min_length=1)


class SEOAnalyzeRequest(BaseModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)


class ChatRequest(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    messages: list[ChatMessage] = Field(min_length=1)
    model: str | None = None


class HashtagsRequest(BaseModel):
    title: str = ""
    content: str = Field(min_length=1)
    count: int = Field(default=10, ge=1, le=30)


class TagsRequest(BaseModel):
    title: str = ""
    content: str = Field(min_length=1)


class ContentAnalyzeRequest(BaseModel):
    title: str | None = None
    content: str = Field(min_length=1)


def get_llm_router(request: Request) -> MultiModelRouter:
    return request.app.state.llm_router


def _unknown_model(model: str | None):
    if model and model not in MODEL_CATALOG:
        return validation_error(
            f"Unknown model: {model}", details={"models": sorted(MODEL_CATALOG)}
        )
    return None


# --- Endpoints ---


@router.post("/ai/generate")
async def generate(body: GenerateRequest, llm: MultiModelRouter = Depends(get_llm_router)):
    if error := _unknown_model(body.model):
        return error
    content, model = await llm.generate_with_model(
        body.prompt, body.task_type or TaskType.SIMPLE, body.model
    )
    return success_response({"content": content, "model": model})


@router.post("/ai/chat")
async def chat_reply(body: ChatRequest, llm: MultiModelRouter = Depends(get_llm_router)):
    if error := _unknown_model(body.model):
        return error
    try:
        reply = await chat(llm, body.messages, body.model)
    except ValueError as e:
        return validation_error(str(e))
    return success_response(reply.model_dump())


@router.post("/ai/titles")
async def titles(body: TitlesRequest, llm: MultiModelRouter = Depends(get_llm_router)):
    result = await generate_titles(llm, body.topic, body.keywords)
    return success_response([t.model_dump() for t in result])


@router.post("/ai/ab-test-titles")
async def ab_test_titles(body: ABTestTitlesRequest, llm: MultiModelRouter = Depends(get_llm_router)):
    result = await generate_ab_test_titles(llm, body.topic, body.keywords, body.count)
    return success_response([t.model_dump() for t in result])


@router.post("/ai/tone")
async def tone(body: ToneRequest, llm: MultiModelRouter = Depends(get_llm_router)):
    result = await change_tone(llm, body.text, body.tone)
    return success_response(result.model_dump())


@router.post("/ai/fact-check")
async def fact_check_text(body: FactCheckRequest, llm: MultiModelRouter = Depends(get_llm_router)):
    report = await fact_check(llm, body.text)
    return success_response(report.model_dump(exclude_none=True))


@router.post("/seo/analyze")
async def seo_analyze(body: SEOAnalyzeRequest, llm: MultiModelRouter = Depends(get_llm_router)):
    analysis = await analyze_seo(llm, body.title, body.content)
    return success_response(analysis.model_dump(by_alias=True))


@router.post("/hashtags/generate")
async def hashtags(body: HashtagsRequest, llm: MultiModelRouter = Depends(get_llm_router)):
    return success_response(await generate_hashtags(llm, body.title, body.content, body.count))


@router.post("/tags/suggest")
async def tags(body: TagsRequest, llm: MultiModelRouter = Depends(get_llm_router)):
    suggestion = await suggest_tags(llm, body.title, body.content)
    return success_response(suggestion.model_dump())


@router.post("/content/analyze")
async def content_analyze(
    body: ContentAnalyzeRequest, llm: MultiModelRouter = Depends(get_llm_router)
):
    analysis = await analyze_content(llm, body.content, body.title)
    return success_response(analysis.model_dump())


# --- Error mapping ---


def add_error_handlers(app: FastAPI) -> None:
    """Map request and LLM errors to the standard error envelope."""

    @app.exception_handler(RequestValidationError)
    async def _on_validation_error(request: Request, exc: RequestValidationError):
        return validation_error("Invalid request body", details=jsonable_encoder(exc.errors()))

    @app.exception_handler(ConfigurationError)
    async def _on_configuration_error(request: Request, exc: ConfigurationError):
        logger.error("LLM not configured for %s: %s", request.url.path, exc)
        return configuration_error(str(exc))

    @app.exception_handler(GenerationError)
    async def _on_generation_error(request: Request, exc: GenerationError):
        logger.error("LLM generation failed for %s: %s", request.url.path, exc)
        details = None if settings.is_production else str(exc)
        return external_api_error(exc.model or "LLM provider", details=details)
