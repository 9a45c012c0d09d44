"""
Pydantic schemas for templates and template generation.

Template text (descriptions, names, titles, detail text fields) may contain
``{placeholder}`` references that are filled in at generation time.
"""
from pydantic import BaseModel, Field, ConfigDict, AfterValidator
from typing import Annotated, Optional, List, Dict
from datetime import date, datetime

from teamflow.schemas.project import (
    ProjectDetailsBase,
    ProjectStatusEnum,
    TaskPriorityEnum,
    TaskStatusEnum,
)


def _require_text(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be blank")
    return v


NonBlankStr = Annotated[str, AfterValidator(_require_text)]

# About a century of calendar days
MAX_OFFSET_DAYS = 36500


# ==================== Definition Schemas ====================

class TaskDefinitionCreate(BaseModel):
    """Task definition inside a template project"""
    title: NonBlankStr = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    priority: TaskPriorityEnum = Field(default=TaskPriorityEnum.MEDIUM)
    start_day: int = Field(default=0, ge=0, le=MAX_OFFSET_DAYS, description="Days after the project's start")
    duration_days: int = Field(default=0, ge=0, le=MAX_OFFSET_DAYS)


class ProjectDefinitionCreate(BaseModel):
    """Project definition inside a template"""
    name: NonBlankStr = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    start_day: int = Field(default=0, ge=0, le=MAX_OFFSET_DAYS, description="Days after the generation start date")
    duration_days: int = Field(default=0, ge=0, le=MAX_OFFSET_DAYS)
    details: Optional[ProjectDetailsBase] = None
    tasks: List[TaskDefinitionCreate] = []


class TemplateCreate(BaseModel):
    """Create a template"""
    name: NonBlankStr = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    projects: List[ProjectDefinitionCreate] = []


class TemplateUpdate(BaseModel):
    """Update a template. When ``projects`` is given it replaces every definition."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    projects: Optional[List[ProjectDefinitionCreate]] = None


class TaskDefinitionResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    priority: TaskPriorityEnum
    start_day: int
    duration_days: int


class ProjectDefinitionResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    start_day: int
    duration_days: int
    details: Optional[ProjectDetailsBase] = None
    tasks: List[TaskDefinitionResponse] = []


class TemplateResponse(BaseModel):
    """Template with every project and task definition"""
    id: int
    name: str
    description: Optional[str] = None
    created_by: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    projects: List[ProjectDefinitionResponse] = []


class TemplateSummary(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TemplateListResponse(BaseModel):
    templates: List[TemplateSummary]
    total: int


class PlaceholderListResponse(BaseModel):
    """Placeholder names in first-appearance order"""
    template_id: int
    placeholders: List[str]


# ==================== Generation Schemas ====================

class GenerationRequest(BaseModel):
    """Instantiate a template for a team"""
    team_id: int = Field(..., ge=1)
    start_date: date = Field(..., description="Anchor date for every day offset (YYYY-MM-DD)")
    variables: Dict[str, str] = Field(default_factory=dict, description="Placeholder name -> value")


class GeneratedProjectResponse(BaseModel):
    id: int
    uuid: str
    name: str
    description: Optional[str] = None
    team_id: int
    status: ProjectStatusEnum
    start_date: date
    due_date: date
    details: Optional[ProjectDetailsBase] = None

    model_config = ConfigDict(from_attributes=True)


class GeneratedTaskResponse(BaseModel):
    id: int
    uuid: str
    project_id: int
    title: str
    description: Optional[str] = None
    priority: TaskPriorityEnum
    status: TaskStatusEnum
    start_date: date
    due_date: date

    model_config = ConfigDict(from_attributes=True)


class GenerationResponse(BaseModel):
    template_id: int
    team_id: int
    start_date: date
    projects: List[GeneratedProjectResponse]
    tasks: List[GeneratedTaskResponse]
    project_count: int
    task_count: int
