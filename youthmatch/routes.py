"""
Matching API Routes

Exposes the ranking engine and safety validator via REST API.
No scoring happens here: payloads are parsed, handed to the core and serialized.
"""

import logging
import time
from typing import Optional, List, Dict, Any
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from . import config
from .logic import (
    Program,
    UserProfile,
    ProgramFilters,
    rank_with_scores,
    score,
    apply_filters,
    initial_match_status,
    needs_parent_approval,
)
from .safety import validate, hide_flagged

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/matches", tags=["matches"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class RankRequest(BaseModel):
    """Request body for the ranking endpoint."""
    user_profile: Dict[str, Any] = Field(
        ...,
        description="User profile with preferences and safety settings",
    )
    programs: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Candidate programs supplied by the catalog",
    )
    filters: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Optional narrowing applied before ranking",
    )
    include_safety: bool = Field(
        default=False,
        description="Attach the safety report to each ranked program",
    )


class ProgramRequest(BaseModel):
    user_profile: Dict[str, Any]
    program: Dict[str, Any]


class SafetyRequest(BaseModel):
    program: Dict[str, Any]


class ApprovalRequest(BaseModel):
    user_profile: Dict[str, Any]


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/rank", summary="Rank programs for a user")
def rank_programs(request: RankRequest):
    """
    Score and rank candidate programs for a user.

    **Request Body:**
    - `user_profile`: Age, interests, location and preferences
    - `programs`: Candidate program records
    - `filters`: Optional categories / cost / distance / days / time / rating filters
    - `include_safety`: Include the safety report for each program

    **Response:**
    - Programs in descending match order with their scores and reasons
    """
    try:
        profile = _parse_profile(request.user_profile)

        if len(request.programs) > config.MAX_PROGRAMS_PER_REQUEST:
            raise HTTPException(
                status_code=400,
                detail=f"Too many programs: {len(request.programs)} (max {config.MAX_PROGRAMS_PER_REQUEST})"
            )
        programs = [_parse_program(p) for p in request.programs]

        start_time = time.perf_counter()
        warnings: List[str] = []

        candidates = programs
        if request.filters is not None:
            filters = _parse_filters(request.filters)
            candidates = apply_filters(profile, candidates, filters)

        hidden = 0
        if config.HIDE_FLAGGED:
            visible = hide_flagged(candidates)
            hidden = len(candidates) - len(visible)
            candidates = visible

        ranked = rank_with_scores(profile, candidates)
        processing_time = (time.perf_counter() - start_time) * 1000

        if not ranked:
            warnings.append("No programs found matching your criteria.")

        recommendations = []
        for position, (program, match) in enumerate(ranked, start=1):
            item = {
                "rank": position,
                "program": program.model_dump(mode="json"),
                "match": _serialize_match(match),
            }
            if request.include_safety:
                item["safety"] = validate(program).model_dump(mode="json")
            recommendations.append(item)

        return {
            "user_id": profile.id,
            "summary": {
                "total_evaluated": len(programs),
                "total_after_filters": len(candidates) + hidden,
                "hidden_flagged": hidden,
                "total_ranked": len(ranked),
                "processing_time_ms": round(processing_time, 2),
            },
            "recommendations": recommendations,
            "warnings": warnings,
            "engine_version": config.ENGINE_VERSION,
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Ranking request failed")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.post("/score", summary="Score a single program")
def score_program(request: ProgramRequest):
    """Detailed match score for one program, including dimension breakdown."""
    try:
        profile = _parse_profile(request.user_profile)
        program = _parse_program(request.program)
        return _serialize_match(score(profile, program))

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Score request failed")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.post("/explain", summary="Explain a program match")
def explain_program(request: ProgramRequest):
    try:
        profile = _parse_profile(request.user_profile)
        program = _parse_program(request.program)
        match = score(profile, program)
        return {"program_id": program.id, "reasons": match.reasons}

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Explain request failed")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.post("/safety", summary="Run safety checks on a program")
def check_program_safety(request: SafetyRequest):
    try:
        program = _parse_program(request.program)
        return validate(program).model_dump(mode="json")

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Safety request failed")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.post("/approval", summary="Initial status for an accepted match")
def match_approval(request: ApprovalRequest):
    try:
        profile = _parse_profile(request.user_profile)
        return {
            "user_id": profile.id,
            "requires_parent_approval": needs_parent_approval(profile),
            "status": initial_match_status(profile).value,
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Approval request failed")
        return JSONResponse(status_code=500, content={"error": str(e)})


def _serialize_match(match) -> Dict[str, Any]:
    """Convert MatchScore to a JSON-serializable dict."""
    return {
        "program_id": match.program_id,
        "score": round(match.score, 3),
        "reasons": match.reasons,
        "age_appropriate": match.age_appropriate,
        "sub_scores": {
            "interest_match": round(match.interest_match, 3),
            "location_score": round(match.location_score, 3),
            "schedule_match": round(match.schedule_match, 3),
            "cost_match": round(match.cost_match, 3),
            "safety_score": round(match.safety_score, 3),
        },
        "dimension_scores": {
            d.dimension: {
                "score": round(d.score, 3),
                "weight": d.weight,
                "weighted_score": round(d.weighted_score, 3),
                "explanation": d.explanation,
            }
            for d in match.dimension_scores
        },
    }


# =============================================================================
# PAYLOAD PARSING
# =============================================================================

def _parse_profile(data: Dict[str, Any]) -> UserProfile:
    try:
        return UserProfile.model_validate(data)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid user profile: {str(e)}")


def _parse_program(data: Dict[str, Any]) -> Program:
    try:
        return Program.model_validate(data)
    except ValidationError as e:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid program {data.get('id', '?')}: {str(e)}"
        )


def _parse_filters(data: Dict[str, Any]) -> ProgramFilters:
    try:
        return ProgramFilters.model_validate(data)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid filters: {str(e)}")


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Matching engine health check")
def health_check():
    """Check if the matching engine is operational."""
    return {"status": "ok", "engine": "matching", "version": config.ENGINE_VERSION}
