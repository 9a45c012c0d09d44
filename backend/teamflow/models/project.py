from sqlalchemy import Column, String, Date, DateTime, Enum as SQLEnum, Integer, Text, ForeignKey, JSON, Index
from sqlalchemy.orm import relationship
import enum

from teamflow.core.database import Base
from teamflow.core.types import GUID, generate_uuid, utcnow


class ProjectStatus(str, enum.Enum):
    """Project status"""
    PLANNING = "planning"
    ACTIVE = "active"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Project(Base):
    """Project model - created manually or generated from a template"""
    __tablename__ = "projects"

    __table_args__ = (
        Index('ix_projects_team_id', 'team_id'),
        Index('ix_projects_status', 'status'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    uuid = Column(GUID, unique=True, nullable=False, default=generate_uuid)
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(SQLEnum(ProjectStatus), default=ProjectStatus.PLANNING, nullable=False)

    start_date = Column(Date, nullable=True)
    due_date = Column(Date, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    team = relationship("Team", back_populates="projects")
    creator = relationship("User", foreign_keys=[created_by])
    tasks = relationship("Task", back_populates="project", cascade="all, delete-orphan", order_by="Task.id")
    details = relationship("ProjectDetails", back_populates="project", uselist=False, cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Project {self.name}>"


class ProjectDetails(Base):
    """Free-form briefing attached to a project (one row per project)"""
    __tablename__ = "project_details"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, unique=True)

    product_info = Column(Text, nullable=True)
    platform_accounts = Column(Text, nullable=True)
    image_folder_link = Column(Text, nullable=True)
    brand_guideline_link = Column(Text, nullable=True)
    customer_notes = Column(Text, nullable=True)
    kpis = Column(Text, nullable=True)
    personnel_count = Column(Integer, nullable=True)
    personnel_levels = Column(Text, nullable=True)
    content_strategy = Column(Text, nullable=True)
    website_page_count = Column(Integer, nullable=True)
    # [{"page": ..., "mainKeyword": {"keyword", "volume"}, "subKeywords": [...]}]
    keywords_plan = Column(JSON, nullable=True)
    cluster_model = Column(Text, nullable=True)
    internal_link_plan = Column(Text, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    project = relationship("Project", back_populates="details")

    def __repr__(self):
        return f"<ProjectDetails project={self.project_id}>"
