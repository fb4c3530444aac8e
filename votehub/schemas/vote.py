# votehub/schemas/vote.py
import datetime as dt
from pydantic import BaseModel, Field
from typing import Annotated, Dict, List, Optional

# NaN, Infinity 불가
FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]

class VoteEntry(BaseModel):
    """프로젝트 1개에 대한 투표"""
    project_id: str = Field(..., min_length=1)
    group_id: str = Field(..., min_length=1)
    scores: Dict[str, FiniteFloat]

class VoteSubmit(BaseModel):
    """투표 제출 요청"""
    votes: List[VoteEntry] = Field(..., min_length=1)
    voter_name: Optional[str] = Field(None, max_length=100)
    group_password: Optional[str] = None
    # 클라이언트가 보관하는 세션 id (없으면 서버에서 새로 발급)
    voter_session_id: Optional[str] = Field(None, min_length=1, max_length=100)

class VoteSubmitResult(BaseModel):
    session_id: str
    votes_count: int

# ===== 결과 =====

class CriterionScore(BaseModel):
    total: float
    count: int
    average: Optional[float] = None

class ProjectResult(BaseModel):
    id: str
    name: str
    description: str
    team_members: List[str]
    total_score: float
    average_score: float
    vote_count: int
    criteria_scores: Dict[str, CriterionScore]
    group_averages: Dict[str, float]
    final_score: float
    rank: int

class PublicGroupResult(BaseModel):
    id: str
    name: str
    weight: float
    total_score: float
    vote_count: int
    rank: int

class GroupResult(PublicGroupResult):
    """주최자용 (투표자 수 포함)"""
    voter_count: int

class PublicResults(BaseModel):
    projects: List[ProjectResult]
    groups: List[PublicGroupResult]

class Results(BaseModel):
    projects: List[ProjectResult]
    groups: List[GroupResult]

class PublicEventSummary(BaseModel):
    id: str
    name: str
    description: str
    date: dt.date

    class Config:
        from_attributes = True

class EventSummary(PublicEventSummary):
    start_time: dt.time
    close_time: dt.time

class PublicResultsResponse(BaseModel):
    """공개 결과"""
    event: PublicEventSummary
    results: PublicResults
    total_votes: int
    total_voters: int

class ResultsResponse(BaseModel):
    """주최자 결과"""
    event: EventSummary
    results: Results
    total_votes: int
    total_voters: int
