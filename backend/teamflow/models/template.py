"""Template models - reusable blueprints for generating projects and tasks"""
from sqlalchemy import (
    Column, String, DateTime, Enum as SQLEnum, Integer, Text, ForeignKey, JSON, Index, CheckConstraint
)
from sqlalchemy.orm import relationship

from teamflow.core.database import Base
from teamflow.core.types import utcnow
from teamflow.models.task import TaskPriority


class Template(Base):
    """Template - owns an ordered list of project definitions"""
    __tablename__ = "templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    creator = relationship("User", foreign_keys=[created_by])
    projects = relationship(
        "TemplateProject",
        back_populates="template",
        cascade="all, delete-orphan",
        order_by="TemplateProject.position",
    )

    def __repr__(self):
        return f"<Template {self.name}>"


class TemplateProject(Base):
    """Project definition inside a template"""
    __tablename__ = "template_projects"

    __table_args__ = (
        Index('ix_template_projects_template_id', 'template_id'),
        CheckConstraint('start_day >= 0', name='ck_template_projects_start_day'),
        CheckConstraint('duration_days >= 0', name='ck_template_projects_duration_days'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    template_id = Column(Integer, ForeignKey("templates.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, default=0, nullable=False)

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    start_day = Column(Integer, default=0, nullable=False)  # Days after the generation start date
    duration_days = Column(Integer, default=0, nullable=False)

    # Details block: text fields may hold placeholders, keywords_plan is copied as-is
    details = Column(JSON, nullable=True)

    # Relationships
    template = relationship("Template", back_populates="projects")
    tasks = relationship(
        "TemplateTask",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="TemplateTask.position",
    )

    def __repr__(self):
        return f"<TemplateProject {self.name}>"


class TemplateTask(Base):
    """Task definition inside a template project"""
    __tablename__ = "template_tasks"

    __table_args__ = (
        Index('ix_template_tasks_template_project_id', 'template_project_id'),
        CheckConstraint('start_day >= 0', name='ck_template_tasks_start_day'),
        CheckConstraint('duration_days >= 0', name='ck_template_tasks_duration_days'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    template_project_id = Column(Integer, ForeignKey("template_projects.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, default=0, nullable=False)

    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(SQLEnum(TaskPriority), default=TaskPriority.MEDIUM, nullable=False)
    start_day = Column(Integer, default=0, nullable=False)  # Days after its project's start
    duration_days = Column(Integer, default=0, nullable=False)

    project = relationship("TemplateProject", back_populates="tasks")

    def __repr__(self):
        return f"<TemplateTask {self.title}>"
