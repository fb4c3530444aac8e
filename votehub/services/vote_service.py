# votehub/services/vote_service.py
import math
import uuid
from typing import List, Tuple

from sqlalchemy.orm import Session

from votehub.core.errors import ConflictError, ForbiddenError, ValidationError
from votehub.core.logger import logger
from votehub.models.event import Event
from votehub.models.vote import Vote
from votehub.schemas.vote import VoteEntry
from votehub.services import event_service
from votehub.services.voting_window import OPEN

def validate_scores(event: Event, scores: dict) -> None:
    """기준 이름과 점수 범위 검증"""
    if not scores:
        raise ValidationError("점수(scores)가 필요합니다", field="scores")

    for criterion_name, score in scores.items():
        criterion = event.find_criterion(criterion_name)
        if not criterion:
            raise ValidationError(
                f"평가 기준 '{criterion_name}'을(를) 찾을 수 없습니다",
                field=f"scores.{criterion_name}"
            )

        if not math.isfinite(score) or score < 1 or score > criterion.max_score:
            raise ValidationError(
                f"'{criterion_name}' 점수는 1에서 {criterion.max_score} 사이여야 합니다",
                field=f"scores.{criterion_name}"
            )

def submit_votes(
    db: Session,
    event_id: str,
    entries: List[VoteEntry],
    voter_name: str | None = None,
    group_password: str | None = None,
    voter_session_id: str | None = None
) -> Tuple[str, List[Vote]]:
    """
    투표 일괄 제출
    - 하나라도 실패하면 전체 미저장
    - 세션 id는 배치 전체에 하나 (클라이언트가 주면 그대로 사용)
    """

    event = event_service.get_active_event(db, event_id)

    # 투표 기간 확인
    if event.voting_status != OPEN:
        logger.warning(f"투표 거부 (기간 아님): {event_id} - {event.voting_status}")
        raise ForbiddenError("현재 투표 기간이 아닙니다")

    session_id = voter_session_id or str(uuid.uuid4())

    if not entries:
        raise ValidationError("투표 목록이 비어 있습니다", field="votes")

    pending = []
    voted_projects = set()

    for entry in entries:
        project = event.find_project(entry.project_id)
        if not project:
            raise ValidationError(f"프로젝트 {entry.project_id}을(를) 찾을 수 없습니다", field="project_id")

        group = event.find_group(entry.group_id)
        if not group:
            raise ValidationError(f"그룹 {entry.group_id}을(를) 찾을 수 없습니다", field="group_id")

        # 그룹 비밀번호
        if group.password and group.password != group_password:
            logger.warning(f"투표 거부 (그룹 비밀번호 불일치): {event_id} / {group.id}")
            raise ForbiddenError("그룹 비밀번호가 올바르지 않습니다")

        validate_scores(event, entry.scores)

        # 중복 투표 확인 (같은 배치 + 기존 투표)
        existing_vote = db.query(Vote.id)\
            .filter(
                Vote.event_id == event.id,
                Vote.voter_session_id == session_id,
                Vote.project_id == project.id
            )\
            .first()

        if existing_vote or project.id in voted_projects:
            raise ConflictError(f"이미 투표한 프로젝트입니다: {project.name}")

        voted_projects.add(project.id)
        pending.append(Vote(
            event_id=event.id,
            project_id=project.id,
            group_id=group.id,
            scores=dict(entry.scores),
            voter_session_id=session_id,
            voter_name=voter_name
        ))

    db.add_all(pending)
    db.commit()

    logger.info(f"투표 저장: {event_id} - 세션 {session_id} - {len(pending)}건")
    return session_id, pending
