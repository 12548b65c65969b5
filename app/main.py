"""FastAPI application exposing the devmatch ICP matching engine."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from devmatch.config import get_settings
from devmatch.criteria import CRITERIA
from devmatch.engine import MatchingEngine
from devmatch.exceptions import DevmatchError
from devmatch.models import DeveloperMatch, DeveloperProfile, MatchPreview, TargetCriteria
from devmatch.preview import match_preview

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="devmatch ICP Matching API",
    description=(
        "Rank developer profiles against a project's ideal customer profile "
        "using weighted multi-criterion scoring."
    ),
    version="0.1.0",
)

_default_engine = MatchingEngine()


class MatchRequest(BaseModel):
    target: TargetCriteria = Field(..., description="ICP criteria configured on the project")
    developers: List[DeveloperProfile] = Field(..., description="Developer pool to rank")
    exclude_ids: List[str] = Field(
        default_factory=list, description="Developers to skip, e.g. already invited"
    )
    limit: Optional[int] = Field(
        default=None,
        ge=1,
        le=settings.max_limit,
        description="Maximum number of matches to return",
    )


class MatchResponse(BaseModel):
    total_candidates: int
    results: List[DeveloperMatch]


class PreviewRequest(BaseModel):
    target: TargetCriteria
    developers: List[DeveloperProfile]


class CriterionResponse(BaseModel):
    target_field: str
    candidate_field: str
    label: str
    weight: float
    kind: str


@app.exception_handler(DevmatchError)
async def devmatch_error_handler(request: Request, exc: DevmatchError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/health", summary="Service health probe")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/criteria", response_model=List[CriterionResponse], summary="Scoring criteria")
async def criteria() -> List[CriterionResponse]:
    return [
        CriterionResponse(
            target_field=criterion.target_field,
            candidate_field=criterion.candidate_field,
            label=criterion.label,
            weight=criterion.weight,
            kind=criterion.kind.value,
        )
        for criterion in CRITERIA
    ]


@app.post("/match", response_model=MatchResponse, summary="Rank developers against an ICP")
async def match(request: MatchRequest) -> MatchResponse:
    limit = request.limit if request.limit is not None else settings.default_limit
    results = _default_engine.score_and_rank(
        request.target, request.developers, set(request.exclude_ids), limit=limit
    )
    logger.info(
        "Matched %d of %d developers (limit %d)", len(results), len(request.developers), limit
    )
    return MatchResponse(total_candidates=len(request.developers), results=results)


@app.post("/match-preview", response_model=MatchPreview, summary="Anonymised match preview")
async def preview(request: PreviewRequest) -> MatchPreview:
    result = match_preview(
        request.target, request.developers, sample_size=settings.preview_sample_size
    )
    logger.info("Preview found %d matching developers", result.total_matches)
    return result
