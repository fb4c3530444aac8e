# votehub/models/vote.py
from sqlalchemy import Column, String, DateTime, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from votehub.database import Base
import uuid

class Vote(Base):
    """투표 모델 (프로젝트 1개 x 그룹 1개의 기준별 점수)"""
    __tablename__ = "votes"

    # 같은 세션이 같은 프로젝트에 두 번 투표 불가
    __table_args__ = (
        UniqueConstraint("event_id", "voter_session_id", "project_id", name="uq_vote_event_session_project"),
    )

    # 기본 필드
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id = Column(String, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)

    # 이벤트 내부 id 참조 (프로젝트 삭제 시에도 투표는 남음)
    project_id = Column(String, nullable=False)
    group_id = Column(String, nullable=False, index=True)

    # 점수 {"Creativity": 8, "Execution": 6}
    scores = Column(JSON, nullable=False)

    # 투표자 정보 (로그인 없음)
    voter_session_id = Column(String, nullable=False)
    voter_name = Column(String(100), nullable=True)

    # 타임스탬프
    submitted_at = Column(DateTime(timezone=True), server_default=func.now())

    # 관계
    event = relationship("Event", back_populates="votes")

    def __repr__(self):
        return f"<Vote {self.id} for Project {self.project_id}>"
