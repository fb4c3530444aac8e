# votehub/api/routes/events.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from votehub.database import get_db
from votehub.models.user import User
from votehub.schemas.common import ApiResponse, MessageResponse, PasswordCheckResponse
from votehub.schemas.event import (
    EventCreate,
    EventUpdate,
    EventResponse,
    PublicEventResponse,
    GroupCreate,
    GroupResponse,
    GroupWeightUpdate,
    GroupPasswordCheck,
    ProjectCreate,
    ProjectResponse,
    CriterionCreate,
    CriterionResponse
)
from votehub.api.deps import get_current_user
from votehub.core.errors import NotFoundError, ValidationError
from votehub.services import event_service

router = APIRouter(prefix="/api/events", tags=["이벤트"])

# ===== 공개 (인증 불필요) =====

@router.get("/vote/{vote_code}", response_model=ApiResponse[PublicEventResponse])
def get_event_by_vote_code(vote_code: str, db: Session = Depends(get_db)):
    """투표 코드로 이벤트 조회 (비밀번호 제외)"""
    event = event_service.get_active_event_by_code(db, vote_code)
    return {"success": True, "data": event}

@router.post("/vote/{vote_code}/validate-password", response_model=PasswordCheckResponse)
def validate_group_password(
    vote_code: str,
    data: GroupPasswordCheck,
    db: Session = Depends(get_db)
):
    """그룹 비밀번호 확인"""
    event = event_service.get_active_event_by_code(db, vote_code)

    group = event.find_group(data.group_id)
    if not group:
        raise NotFoundError("그룹을 찾을 수 없습니다")

    if not group.password:
        raise ValidationError("비밀번호가 필요 없는 그룹입니다", field="group_id")

    return {"success": True, "is_valid": group.password == data.password}

# ===== 주최자 전용 =====

@router.get("", response_model=ApiResponse[List[EventResponse]])
def get_my_events(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """내 이벤트 목록"""
    return {"success": True, "data": event_service.list_events(db, current_user)}

@router.post("", response_model=ApiResponse[EventResponse], status_code=status.HTTP_201_CREATED)
def create_event(
    data: EventCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """이벤트 생성"""
    event = event_service.create_event(db, current_user, data)
    return {"success": True, "message": "이벤트 생성 완료", "data": event}

@router.get("/{event_id}", response_model=ApiResponse[EventResponse])
def get_event(
    event_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """이벤트 상세"""
    event = event_service.get_owned_event(db, event_id, current_user)
    return {"success": True, "data": event}

@router.put("/{event_id}", response_model=ApiResponse[EventResponse])
def update_event(
    event_id: str,
    data: EventUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """이벤트 수정"""
    event = event_service.get_owned_event(db, event_id, current_user)
    event = event_service.update_event(db, event, data)
    return {"success": True, "message": "이벤트 수정 완료", "data": event}

@router.delete("/{event_id}", response_model=MessageResponse)
def delete_event(
    event_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """이벤트 삭제 (투표 포함)"""
    event = event_service.get_owned_event(db, event_id, current_user)
    event_service.delete_event(db, event)
    return {"success": True, "message": "이벤트 삭제 완료"}

@router.post("/{event_id}/open-voting", response_model=ApiResponse[EventResponse])
def open_voting(
    event_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """투표 수동 오픈"""
    event = event_service.get_owned_event(db, event_id, current_user)
    event = event_service.set_voting_override(db, event, True)
    return {"success": True, "message": "투표가 열렸습니다", "data": event}

@router.post("/{event_id}/close-voting", response_model=ApiResponse[EventResponse])
def close_voting(
    event_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """투표 수동 마감"""
    event = event_service.get_owned_event(db, event_id, current_user)
    event = event_service.set_voting_override(db, event, False)
    return {"success": True, "message": "투표가 마감되었습니다", "data": event}

# ----- 그룹 -----

@router.post("/{event_id}/groups", response_model=ApiResponse[GroupResponse])
def add_group(
    event_id: str,
    data: GroupCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """그룹 추가"""
    event = event_service.get_owned_event(db, event_id, current_user)
    group = event_service.add_group(db, event, data)
    return {"success": True, "message": "그룹 추가 완료", "data": group}

@router.delete("/{event_id}/groups/{group_id}", response_model=MessageResponse)
def remove_group(
    event_id: str,
    group_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """그룹 삭제 (해당 그룹 투표 포함)"""
    event = event_service.get_owned_event(db, event_id, current_user)
    event_service.remove_group(db, event, group_id)
    return {"success": True, "message": "그룹 삭제 완료"}

@router.put("/{event_id}/groups/{group_id}/weight", response_model=ApiResponse[GroupResponse])
def update_group_weight(
    event_id: str,
    group_id: str,
    data: GroupWeightUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """그룹 가중치 수정"""
    event = event_service.get_owned_event(db, event_id, current_user)
    group = event_service.update_group_weight(db, event, group_id, data.weight)
    return {"success": True, "message": "가중치 수정 완료", "data": group}

# ----- 프로젝트 -----

@router.post("/{event_id}/projects", response_model=ApiResponse[ProjectResponse])
def add_project(
    event_id: str,
    data: ProjectCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """프로젝트 추가"""
    event = event_service.get_owned_event(db, event_id, current_user)
    project = event_service.add_project(db, event, data)
    return {"success": True, "message": "프로젝트 추가 완료", "data": project}

@router.delete("/{event_id}/projects/{project_id}", response_model=MessageResponse)
def remove_project(
    event_id: str,
    project_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """프로젝트 삭제"""
    event = event_service.get_owned_event(db, event_id, current_user)
    event_service.remove_project(db, event, project_id)
    return {"success": True, "message": "프로젝트 삭제 완료"}

# ----- 평가 기준 -----

@router.post("/{event_id}/criteria", response_model=ApiResponse[CriterionResponse])
def add_criterion(
    event_id: str,
    data: CriterionCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """평가 기준 추가"""
    event = event_service.get_owned_event(db, event_id, current_user)
    criterion = event_service.add_criterion(db, event, data)
    return {"success": True, "message": "평가 기준 추가 완료", "data": criterion}

@router.delete("/{event_id}/criteria/{index}", response_model=ApiResponse[CriterionResponse])
def remove_criterion(
    event_id: str,
    index: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """평가 기준 삭제 (index)"""
    event = event_service.get_owned_event(db, event_id, current_user)
    removed = event_service.remove_criterion(db, event, index)
    return {"success": True, "message": "평가 기준 삭제 완료", "data": removed}
