# votehub/models/event.py
from sqlalchemy import Column, String, Integer, Boolean, Date, Time, DateTime, ForeignKey, JSON
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from votehub.database import Base
from votehub.services.voting_window import get_voting_status
import uuid

class Event(Base):
    """이벤트 모델"""
    __tablename__ = "events"

    # 기본 필드
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(200), nullable=False)
    description = Column(String(1000), default="")

    # 일정 (로컬 시간)
    date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=False)
    close_time = Column(Time, nullable=False)

    # 투표 코드 (대문자로 저장, 대소문자 무시 조회)
    vote_code = Column(String(12), unique=True, index=True, nullable=False)

    # 상태
    is_active = Column(Boolean, default=True, nullable=False)
    is_voting_open = Column(Boolean, nullable=True)  # None=자동, True=강제 오픈, False=강제 마감

    # 타임스탬프
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # 관계 (입력 순서 유지)
    owner = relationship("User", backref="events")
    groups = relationship(
        "Group",
        back_populates="event",
        order_by="Group.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan"
    )
    projects = relationship(
        "Project",
        back_populates="event",
        order_by="Project.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan"
    )
    criteria = relationship(
        "Criterion",
        back_populates="event",
        order_by="Criterion.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan"
    )
    votes = relationship("Vote", back_populates="event", cascade="all, delete-orphan")

    @property
    def voting_status(self) -> str:
        """투표 상태 (매 조회마다 계산)"""
        return get_voting_status(self.date, self.start_time, self.close_time, self.is_voting_open)

    def find_group(self, group_id: str):
        return next((g for g in self.groups if g.id == group_id), None)

    def find_project(self, project_id: str):
        return next((p for p in self.projects if p.id == project_id), None)

    def find_criterion(self, name: str):
        return next((c for c in self.criteria if c.name == name), None)

    def __repr__(self):
        return f"<Event {self.name} ({self.vote_code})>"


class Group(Base):
    """투표자 그룹 (가중치, 선택적 비밀번호)"""
    __tablename__ = "event_groups"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id = Column(String, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    name = Column(String(100), nullable=False)
    weight = Column(Integer, nullable=False, default=50)  # 0 ~ 100
    password = Column(String, nullable=True)  # 평문 비교

    event = relationship("Event", back_populates="groups")

    @property
    def has_password(self) -> bool:
        return bool(self.password)

    def __repr__(self):
        return f"<Group {self.name} w={self.weight}>"


class Project(Base):
    """평가 대상 프로젝트"""
    __tablename__ = "event_projects"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id = Column(String, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    name = Column(String(200), nullable=False)
    description = Column(String(1000), default="")
    team_members = Column(JSON, nullable=False, default=list)  # ["이름", ...]

    event = relationship("Event", back_populates="projects")

    def __repr__(self):
        return f"<Project {self.name}>"


class Criterion(Base):
    """평가 기준"""
    __tablename__ = "event_criteria"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id = Column(String, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    name = Column(String(100), nullable=False)
    max_score = Column(Integer, nullable=False)  # 1 ~ 100

    event = relationship("Event", back_populates="criteria")

    def __repr__(self):
        return f"<Criterion {self.name}/{self.max_score}>"
