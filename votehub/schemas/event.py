# votehub/schemas/event.py
from pydantic import BaseModel, Field, field_validator
import datetime as dt
from typing import List, Optional

# ===== 요청 =====

class GroupCreate(BaseModel):
    """그룹 추가 요청"""
    name: str = Field(..., min_length=1, max_length=100)
    weight: int = Field(50, ge=0, le=100)
    password: Optional[str] = None

    @field_validator('name')
    def strip_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('그룹 이름은 비어 있을 수 없습니다')
        return v

    @field_validator('password')
    def blank_password_to_none(cls, v):
        # 빈 문자열은 비밀번호 없음
        if v is None:
            return None
        v = v.strip()
        return v or None

class ProjectCreate(BaseModel):
    """프로젝트 추가 요청"""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field("", max_length=1000)
    team_members: List[str] = []

    @field_validator('team_members')
    def strip_members(cls, v):
        return [m.strip() for m in v if m and m.strip()]

class CriterionCreate(BaseModel):
    """평가 기준 추가 요청"""
    name: str = Field(..., min_length=1, max_length=100)
    max_score: int = Field(..., ge=1, le=100)

class EventCreate(BaseModel):
    """이벤트 생성 요청"""
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    date: dt.date
    start_time: dt.time
    close_time: dt.time
    groups: List[GroupCreate] = []
    projects: List[ProjectCreate] = []
    criteria: List[CriterionCreate] = []

class EventUpdate(BaseModel):
    """이벤트 수정 요청 (보낸 필드만 반영)"""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    date: Optional[dt.date] = None
    start_time: Optional[dt.time] = None
    close_time: Optional[dt.time] = None
    is_active: Optional[bool] = None
    is_voting_open: Optional[bool] = None  # null 로 보내면 자동 모드

class GroupWeightUpdate(BaseModel):
    """그룹 가중치 수정 요청"""
    weight: int = Field(..., ge=0, le=100)

class GroupPasswordCheck(BaseModel):
    """그룹 비밀번호 확인 요청"""
    group_id: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

# ===== 응답 =====

class GroupResponse(BaseModel):
    """그룹 (주최자용, 비밀번호 포함)"""
    id: str
    name: str
    weight: int
    password: Optional[str] = None

    class Config:
        from_attributes = True

class PublicGroupResponse(BaseModel):
    """그룹 (투표자용, 비밀번호 여부만)"""
    id: str
    name: str
    weight: int
    has_password: bool

    class Config:
        from_attributes = True

class ProjectResponse(BaseModel):
    id: str
    name: str
    description: str
    team_members: List[str]

    class Config:
        from_attributes = True

class CriterionResponse(BaseModel):
    name: str
    max_score: int

    class Config:
        from_attributes = True

class EventResponse(BaseModel):
    """이벤트 응답 (주최자용)"""
    id: str
    owner_id: str
    name: str
    description: str
    date: dt.date
    start_time: dt.time
    close_time: dt.time
    vote_code: str
    is_active: bool
    is_voting_open: Optional[bool]
    voting_status: str
    groups: List[GroupResponse]
    projects: List[ProjectResponse]
    criteria: List[CriterionResponse]
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True

class PublicEventResponse(BaseModel):
    """투표 코드로 조회한 이벤트 (민감 정보 제외)"""
    id: str
    name: str
    description: str
    date: dt.date
    start_time: dt.time
    close_time: dt.time
    vote_code: str
    voting_status: str
    groups: List[PublicGroupResponse]
    projects: List[ProjectResponse]
    criteria: List[CriterionResponse]

    class Config:
        from_attributes = True
