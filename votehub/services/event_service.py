# votehub/services/event_service.py
import secrets
import string
from typing import List

from sqlalchemy.orm import Session

from votehub.core.errors import ForbiddenError, NotFoundError, ValidationError
from votehub.core.logger import logger
from votehub.models.event import Criterion, Event, Group, Project
from votehub.models.user import User
from votehub.models.vote import Vote
from votehub.schemas.event import CriterionCreate, EventCreate, EventUpdate, GroupCreate, ProjectCreate

VOTE_CODE_LENGTH = 6
VOTE_CODE_ALPHABET = string.ascii_uppercase + string.digits
MAX_VOTE_CODE_ATTEMPTS = 10

# 기준이 없으면 기본 3개
DEFAULT_CRITERIA = [
    ("Creativity", 10),
    ("Execution", 10),
    ("Impact", 10),
]

def generate_vote_code(db: Session) -> str:
    """겹치지 않는 투표 코드 생성"""
    for _ in range(MAX_VOTE_CODE_ATTEMPTS):
        code = "".join(secrets.choice(VOTE_CODE_ALPHABET) for _ in range(VOTE_CODE_LENGTH))
        exists = db.query(Event.id).filter(Event.vote_code == code).first()
        if not exists:
            return code
    raise RuntimeError("투표 코드 생성 실패")

def default_description(name: str) -> str:
    return f"Join us for {name} - an exciting event where innovation meets collaboration!"

def create_event(db: Session, owner: User, data: EventCreate) -> Event:
    """이벤트 생성"""

    event = Event(
        owner_id=owner.id,
        name=data.name,
        description=data.description or default_description(data.name),
        date=data.date,
        start_time=data.start_time,
        close_time=data.close_time,
        vote_code=generate_vote_code(db)
    )

    for group in data.groups:
        event.groups.append(Group(name=group.name, weight=group.weight, password=group.password))
    for project in data.projects:
        event.projects.append(
            Project(name=project.name, description=project.description, team_members=project.team_members)
        )

    criteria = [(c.name, c.max_score) for c in data.criteria] or DEFAULT_CRITERIA
    for name, max_score in criteria:
        event.criteria.append(Criterion(name=name, max_score=max_score))

    db.add(event)
    db.commit()
    db.refresh(event)

    logger.info(f"이벤트 생성: {event.id} ({event.vote_code}) by {owner.username}")
    return event

def list_events(db: Session, owner: User) -> List[Event]:
    """내 이벤트 목록 (최신순)"""
    return db.query(Event)\
        .filter(Event.owner_id == owner.id)\
        .order_by(Event.created_at.desc())\
        .all()

def get_owned_event(db: Session, event_id: str, user: User) -> Event:
    """이벤트 조회 + 소유자 확인"""
    event = db.query(Event).filter(Event.id == event_id).first()
    if not event:
        raise NotFoundError("이벤트를 찾을 수 없습니다")

    if event.owner_id != user.id:
        raise ForbiddenError("권한이 없습니다")

    return event

def get_active_event_by_code(db: Session, vote_code: str) -> Event:
    """투표 코드로 활성 이벤트 조회 (대소문자 무시)"""
    event = db.query(Event)\
        .filter(Event.vote_code == vote_code.strip().upper(), Event.is_active == True)\
        .first()
    if not event:
        raise NotFoundError("이벤트를 찾을 수 없거나 비활성 상태입니다")
    return event

def get_active_event(db: Session, event_id: str) -> Event:
    event = db.query(Event).filter(Event.id == event_id).first()
    if not event or not event.is_active:
        raise NotFoundError("이벤트를 찾을 수 없거나 비활성 상태입니다")
    return event

def update_event(db: Session, event: Event, data: EventUpdate) -> Event:
    """이벤트 수정 (보낸 필드만)"""
    changes = data.model_dump(exclude_unset=True)

    # 필수 필드는 null 불가
    for field in ("name", "date", "start_time", "close_time", "is_active"):
        if field in changes and changes[field] is None:
            raise ValidationError(f"{field} 값은 비워둘 수 없습니다", field=field)

    if "description" in changes and changes["description"] is None:
        changes["description"] = ""

    for field, value in changes.items():
        setattr(event, field, value)

    db.commit()
    db.refresh(event)
    return event

def set_voting_override(db: Session, event: Event, is_open: bool) -> Event:
    """수동 투표 오픈/마감"""
    event.is_voting_open = is_open
    db.commit()
    db.refresh(event)

    logger.info(f"투표 수동 {'오픈' if is_open else '마감'}: {event.id}")
    return event

def delete_event(db: Session, event: Event) -> None:
    """이벤트 삭제 (투표도 함께 삭제)"""
    event_id = event.id
    deleted_votes = db.query(Vote).filter(Vote.event_id == event_id).delete(synchronize_session=False)
    db.delete(event)
    db.commit()

    logger.info(f"이벤트 삭제: {event_id} (투표 {deleted_votes}건 삭제)")

def add_group(db: Session, event: Event, data: GroupCreate) -> Group:
    group = Group(name=data.name, weight=data.weight, password=data.password)
    event.groups.append(group)
    db.commit()
    db.refresh(group)
    return group

def remove_group(db: Session, event: Event, group_id: str) -> None:
    """그룹 삭제 (해당 그룹 투표도 삭제)"""
    group = event.find_group(group_id)
    if not group:
        raise NotFoundError("그룹을 찾을 수 없습니다")

    event.groups.remove(group)
    deleted_votes = db.query(Vote)\
        .filter(Vote.event_id == event.id, Vote.group_id == group_id)\
        .delete(synchronize_session=False)
    db.commit()

    logger.info(f"그룹 삭제: {group_id} (투표 {deleted_votes}건 삭제)")

def update_group_weight(db: Session, event: Event, group_id: str, weight: int) -> Group:
    group = event.find_group(group_id)
    if not group:
        raise NotFoundError("그룹을 찾을 수 없습니다")

    group.weight = weight
    db.commit()
    db.refresh(group)
    return group

def add_project(db: Session, event: Event, data: ProjectCreate) -> Project:
    project = Project(name=data.name, description=data.description, team_members=data.team_members)
    event.projects.append(project)
    db.commit()
    db.refresh(project)
    return project

def remove_project(db: Session, event: Event, project_id: str) -> None:
    """프로젝트 삭제 (투표는 남고 집계에서 제외됨)"""
    project = event.find_project(project_id)
    if not project:
        raise NotFoundError("프로젝트를 찾을 수 없습니다")

    event.projects.remove(project)
    db.commit()

def add_criterion(db: Session, event: Event, data: CriterionCreate) -> Criterion:
    criterion = Criterion(name=data.name, max_score=data.max_score)
    event.criteria.append(criterion)
    db.commit()
    db.refresh(criterion)
    return criterion

def remove_criterion(db: Session, event: Event, index: int) -> dict:
    """평가 기준 삭제 (순서 index 기준)"""
    if index < 0 or index >= len(event.criteria):
        raise ValidationError("유효하지 않은 평가 기준 index 입니다", field="index")

    criterion = event.criteria.pop(index)
    removed = {"name": criterion.name, "max_score": criterion.max_score}
    db.commit()
    return removed
