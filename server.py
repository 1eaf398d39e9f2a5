"""
FastAPI application for the Lifetime GPS career matching service.
Stateless: every request carries the answers it needs.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

import config
from core.mini_games import GameResult, build_cognitive_profile, completion_stats, profile_metrics
from differentiation.flow import DifferentiationState, OverlapDifferentiation, run_overlap_differentiation
from inference.answer_converter import aggregate
from ingestion.build_career_catalog import load_career_catalog
from matching.aggregate import score_percentages
from matching.ranking import build_ranking
from models.ranked_match import RankedMatch

config.configure_logging()

logger = logging.getLogger(__name__)

app = FastAPI(title="Lifetime GPS Career Matching API", version="1.0.0")

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_catalog():
    return load_career_catalog()


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class CareerMatch(BaseModel):
    """A ranked career as the frontend sees it"""
    id: str = ""
    title: str
    description: str = ""
    skills: List[str] = []
    salary: str = ""
    outlook: str = ""
    category: str = ""
    match: float

    @classmethod
    def from_ranked(cls, ranked: RankedMatch) -> "CareerMatch":
        return cls(**ranked.to_dict())

    def to_ranked(self) -> RankedMatch:
        return RankedMatch(
            career_id=self.id,
            title=self.title,
            match_percentage=self.match,
            description=self.description,
            skills=tuple(self.skills),
            salary=self.salary,
            outlook=self.outlook,
            category=self.category,
        )


class AssessmentSubmission(BaseModel):
    """Quiz answers from frontend, keyed by sector"""
    responses: Dict[str, Any] = {}
    interests: Optional[Union[str, List[int]]] = None
    mini_game_metrics: Optional[Dict[str, float]] = None
    top_n: Optional[int] = None


class AssessmentResponse(BaseModel):
    """Response after assessment submission"""
    profile: Dict
    percentages: Dict[str, float]
    matches: List[CareerMatch]
    insufficient_data: bool
    has_overlap: bool
    overlap_categories: List[str]
    questions: List[Dict]
    message: str


class OverlapRefineRequest(BaseModel):
    matches: List[CareerMatch]
    # question id -> chosen option index
    responses: Dict[str, int] = {}


class OverlapSkipRequest(BaseModel):
    matches: List[CareerMatch]


class OverlapResultResponse(BaseModel):
    refined_matches: List[CareerMatch]
    explanations: Dict[str, str]


class GameResultSubmission(BaseModel):
    game_id: str
    timestamp: float
    difficulty: int = 1
    metrics: Dict[str, float] = {}
    completed: bool = True


class MiniGameProfileRequest(BaseModel):
    results: List[GameResultSubmission]


class MiniGameProfileResponse(BaseModel):
    profile: Optional[Dict]
    metrics: Dict[str, float]
    completion: Dict[str, float]


# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/")
@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "service": "lifetime-gps-matching",
        "timestamp": datetime.now().isoformat()
    }


# ============================================================================
# CATALOG
# ============================================================================

@app.get("/careers", response_model=List[CareerMatch])
async def list_careers(catalog=Depends(get_catalog)):
    """Every career in the catalog, unscored"""
    return [CareerMatch.from_ranked(RankedMatch.from_career(career, 0.0)) for career in catalog]


# ============================================================================
# GUEST ENDPOINTS
# ============================================================================

@app.post("/guest/assessment", response_model=AssessmentResponse)
async def guest_assessment(submission: AssessmentSubmission, catalog=Depends(get_catalog)):
    """Guest submits quiz answers and gets career matches (no auth required)"""
    top_n = config.DEFAULT_TOP_N if submission.top_n is None else submission.top_n
    if not 1 <= top_n <= config.MAX_TOP_N:
        raise HTTPException(
            status_code=400,
            detail=f"top_n must be between 1 and {config.MAX_TOP_N}"
        )

    profile = aggregate(
        submission.responses,
        mini_game_metrics=submission.mini_game_metrics,
        interest_ids=submission.interests,
    )
    percentages = score_percentages(profile)
    ranking = build_ranking(profile, catalog, top_n)

    if ranking.insufficient_data:
        outcome = None
        message = "Not enough answers to rank careers yet"
    else:
        outcome = run_overlap_differentiation(ranking.matches)
        message = "Assessment completed successfully"

    logger.info(
        "Guest assessment: %d matches, top %s, overlap %s",
        len(ranking.matches),
        ranking.matches[0].title if ranking.matches else None,
        outcome.overlap_categories if outcome else [],
    )

    return AssessmentResponse(
        profile=profile.to_dict(),
        percentages=percentages.to_dict(),
        matches=[CareerMatch.from_ranked(match) for match in ranking.matches],
        insufficient_data=ranking.insufficient_data,
        has_overlap=bool(outcome and outcome.has_overlap),
        overlap_categories=outcome.overlap_categories if outcome else [],
        questions=[question.to_dict() for question in outcome.questions] if outcome else [],
        message=message,
    )


# ============================================================================
# OVERLAP DIFFERENTIATION
# ============================================================================

@app.post("/overlap/refine", response_model=OverlapResultResponse)
async def refine_overlap(request: OverlapRefineRequest):
    """Apply follow-up quiz answers to a ranked list"""
    flow = OverlapDifferentiation([match.to_ranked() for match in request.matches])

    if flow.state is DifferentiationState.NO_OVERLAP:
        result = flow.result()
    else:
        flow.present_quiz()
        result = flow.submit(request.responses)

    return OverlapResultResponse(
        refined_matches=[CareerMatch.from_ranked(match) for match in result.refined_matches],
        explanations=result.explanations,
    )


@app.post("/overlap/skip", response_model=OverlapResultResponse)
async def skip_overlap(request: OverlapSkipRequest):
    """User declined the follow-up quiz; ranking is returned unchanged"""
    flow = OverlapDifferentiation([match.to_ranked() for match in request.matches])

    if flow.state is DifferentiationState.NO_OVERLAP:
        result = flow.result()
    else:
        result = flow.skip()

    return OverlapResultResponse(
        refined_matches=[CareerMatch.from_ranked(match) for match in result.refined_matches],
        explanations=result.explanations,
    )


# ============================================================================
# MINI-GAMES
# ============================================================================

@app.post("/mini-games/profile", response_model=MiniGameProfileResponse)
async def mini_game_profile(request: MiniGameProfileRequest):
    """Build a cognitive profile from played mini-games"""
    results = [
        GameResult(
            game_id=item.game_id,
            timestamp=item.timestamp,
            difficulty=item.difficulty,
            metrics=dict(item.metrics),
            completed=item.completed,
        )
        for item in request.results
    ]

    profile = build_cognitive_profile(results)

    return MiniGameProfileResponse(
        profile=profile.to_dict() if profile else None,
        metrics=profile_metrics(profile),
        completion=completion_stats(results),
    )


# ============================================================================
# RUN SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
