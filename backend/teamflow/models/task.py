from sqlalchemy import Column, String, Date, DateTime, Enum as SQLEnum, Integer, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
import enum

from teamflow.core.database import Base
from teamflow.core.types import GUID, generate_uuid, utcnow


class TaskStatus(str, enum.Enum):
    """Task status"""
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    IN_REVIEW = "in_review"
    DONE = "done"


class TaskPriority(str, enum.Enum):
    """Task priority"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class Task(Base):
    """Task model - belongs to one project"""
    __tablename__ = "tasks"

    __table_args__ = (
        Index('ix_tasks_project_id', 'project_id'),
        Index('ix_tasks_assignee_id', 'assignee_id'),
        Index('ix_tasks_project_status', 'project_id', 'status'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    uuid = Column(GUID, unique=True, nullable=False, default=generate_uuid)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    reporter_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    assignee_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(SQLEnum(TaskStatus), default=TaskStatus.TODO, nullable=False)
    priority = Column(SQLEnum(TaskPriority), default=TaskPriority.MEDIUM, nullable=False)

    start_date = Column(Date, nullable=True)
    due_date = Column(Date, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    project = relationship("Project", back_populates="tasks")
    reporter = relationship("User", foreign_keys=[reporter_id])
    assignee = relationship("User", foreign_keys=[assignee_id])

    def __repr__(self):
        return f"<Task {self.title}>"
