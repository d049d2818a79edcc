"""
API routes: one endpoint per user action, each returning the ViewState.

Action failures are part of the view (ViewState.error), not HTTP errors:
the endpoints answer 200 and the client shows the error region.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, status

from review_analyzer.api.dependencies import (
    get_app_state,
    get_inference_client,
    get_review_classifier,
    get_reviews_loader,
    get_settings,
)
from review_analyzer.api.models import (
    AnalyzeRequest,
    HealthResponse,
    LoadReviewsRequest,
    TokenRequest,
    ViewState,
)
from review_analyzer.classification.chain import ReviewClassifier
from review_analyzer.config import Settings
from review_analyzer.inference.base_client import BaseInferenceClient
from review_analyzer.session import handlers
from review_analyzer.session.handlers import ReviewLoader
from review_analyzer.session.state import AppState

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    client: BaseInferenceClient = Depends(get_inference_client),
    state: AppState = Depends(get_app_state),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """Report inference reachability and the number of loaded reviews."""
    inference_ok = await client.health_check()
    return HealthResponse(
        status="healthy" if inference_ok else "degraded",
        version=settings.APP_VERSION,
        services={"inference": "up" if inference_ok else "down"},
        reviews_loaded=state.reviews_loaded,
    )


@router.get("/state", response_model=ViewState, summary="Current session view")
async def get_state(state: AppState = Depends(get_app_state)) -> ViewState:
    return ViewState.from_state(state)


@router.put("/token", response_model=ViewState, summary="Set or clear the API token")
async def set_token(
    payload: TokenRequest,
    state: AppState = Depends(get_app_state),
) -> ViewState:
    handlers.set_api_token(state, payload.api_token)
    logger.info("API token updated", has_token=bool(state.api_token))
    return ViewState.from_state(state)


@router.post(
    "/reviews/load",
    response_model=ViewState,
    status_code=status.HTTP_200_OK,
    summary="Load the reviews TSV file",
)
async def load_reviews(
    payload: Optional[LoadReviewsRequest] = None,
    state: AppState = Depends(get_app_state),
    settings: Settings = Depends(get_settings),
    loader: ReviewLoader = Depends(get_reviews_loader),
) -> ViewState:
    source = (payload.source if payload and payload.source else None) or settings.REVIEWS_SOURCE
    await handlers.load_reviews_action(state, source, loader=loader)
    return ViewState.from_state(state)


@router.post("/reviews/random", response_model=ViewState, summary="Select a random review")
async def random_review(state: AppState = Depends(get_app_state)) -> ViewState:
    handlers.select_random_review(state)
    return ViewState.from_state(state)


@router.post("/analyze/sentiment", response_model=ViewState, summary="Classify sentiment")
async def analyze_sentiment(
    payload: Optional[AnalyzeRequest] = None,
    state: AppState = Depends(get_app_state),
    classifier: ReviewClassifier = Depends(get_review_classifier),
) -> ViewState:
    await handlers.analyze_sentiment(
        state, classifier, api_token=payload.api_token if payload else None
    )
    return ViewState.from_state(state)


@router.post("/analyze/nouns", response_model=ViewState, summary="Classify noun-density level")
async def count_nouns(
    payload: Optional[AnalyzeRequest] = None,
    state: AppState = Depends(get_app_state),
    classifier: ReviewClassifier = Depends(get_review_classifier),
) -> ViewState:
    await handlers.count_nouns(
        state, classifier, api_token=payload.api_token if payload else None
    )
    return ViewState.from_state(state)
