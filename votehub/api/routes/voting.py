# votehub/api/routes/voting.py
import json

from fastapi import APIRouter, Depends, Query, status
from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from sqlalchemy.orm import Session
from typing import Dict

from votehub.database import get_db
from votehub.models.user import User
from votehub.models.vote import Vote
from votehub.schemas.common import ApiResponse
from votehub.schemas.vote import FiniteFloat, VoteSubmit, VoteSubmitResult, PublicResultsResponse, ResultsResponse
from votehub.api.deps import get_current_user
from votehub.core.errors import ValidationError
from votehub.core.logger import logger
from votehub.services import event_service, results_service, vote_service

router = APIRouter(tags=["투표"])

weights_adapter = TypeAdapter(Dict[str, FiniteFloat])

def parse_group_weights(raw: str | None) -> dict | None:
    """?weights={"group_id": 70, ...} 파싱"""
    if not raw:
        return None
    try:
        return weights_adapter.validate_python(json.loads(raw))
    except (json.JSONDecodeError, PydanticValidationError):
        raise ValidationError(
            "weights 파라미터는 {그룹 id: 숫자} 형식의 JSON 객체여야 합니다",
            field="weights"
        )

@router.post(
    "/api/vote/{event_id}",
    response_model=ApiResponse[VoteSubmitResult],
    status_code=status.HTTP_201_CREATED
)
def submit_vote(event_id: str, data: VoteSubmit, db: Session = Depends(get_db)):
    """투표 제출 (인증 불필요)"""
    session_id, votes = vote_service.submit_votes(
        db,
        event_id,
        data.votes,
        voter_name=data.voter_name,
        group_password=data.group_password,
        voter_session_id=data.voter_session_id
    )
    return {
        "success": True,
        "message": "투표 완료",
        "data": {"session_id": session_id, "votes_count": len(votes)}
    }

@router.get("/api/results/public/{event_id}", response_model=ApiResponse[PublicResultsResponse])
def get_public_results(
    event_id: str,
    weights: str | None = Query(None, description='{"그룹 id": 가중치} JSON'),
    db: Session = Depends(get_db)
):
    """공개 결과 (가중치 임시 변경 가능)"""
    event = event_service.get_active_event(db, event_id)
    group_weights = parse_group_weights(weights)

    votes = db.query(Vote).filter(Vote.event_id == event.id).all()
    results = results_service.calculate_results(event, votes, group_weights)

    logger.info(f"공개 결과 조회: {event_id} - 투표 {len(votes)}건")
    return {
        "success": True,
        "data": {
            "event": event,
            "results": results,
            **results_service.summarize_votes(votes)
        }
    }

@router.get("/api/results/{event_id}", response_model=ApiResponse[ResultsResponse])
def get_results(
    event_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """결과 상세 (주최자 전용)"""
    event = event_service.get_owned_event(db, event_id, current_user)

    votes = db.query(Vote).filter(Vote.event_id == event.id).all()
    results = results_service.calculate_results(event, votes)

    logger.info(f"결과 조회: {event_id} - 투표 {len(votes)}건")
    return {
        "success": True,
        "data": {
            "event": event,
            "results": results,
            **results_service.summarize_votes(votes)
        }
    }
