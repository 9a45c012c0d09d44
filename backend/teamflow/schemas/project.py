"""Pydantic schemas for projects, their details block and tasks"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import date, datetime
from enum import Enum


class ProjectStatusEnum(str, Enum):
    PLANNING = "planning"
    ACTIVE = "active"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskStatusEnum(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    IN_REVIEW = "in_review"
    DONE = "done"


class TaskPriorityEnum(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


# ==================== Details Schemas ====================

class KeywordVolume(BaseModel):
    keyword: str = ""
    volume: int = Field(default=0, ge=0)


class KeywordPlanEntry(BaseModel):
    """One page of an SEO keyword plan. Field names follow the stored JSON."""
    page: Optional[str] = None
    mainKeyword: Optional[KeywordVolume] = None
    subKeywords: List[KeywordVolume] = []


class ProjectDetailsBase(BaseModel):
    """Briefing attached to a project. Text fields may hold {placeholders} in templates."""
    product_info: Optional[str] = None
    platform_accounts: Optional[str] = None
    image_folder_link: Optional[str] = None
    brand_guideline_link: Optional[str] = None
    customer_notes: Optional[str] = None
    kpis: Optional[str] = None
    personnel_count: Optional[int] = Field(None, ge=0)
    personnel_levels: Optional[str] = None
    content_strategy: Optional[str] = None
    website_page_count: Optional[int] = Field(None, ge=0)
    keywords_plan: Optional[List[KeywordPlanEntry]] = None
    cluster_model: Optional[str] = None
    internal_link_plan: Optional[str] = None


class ProjectDetailsResponse(ProjectDetailsBase):
    model_config = ConfigDict(from_attributes=True)


# ==================== Task Schemas ====================

class TaskResponse(BaseModel):
    """Task details response"""
    id: int
    uuid: str
    project_id: int
    reporter_id: Optional[int] = None
    assignee_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    status: TaskStatusEnum
    priority: TaskPriorityEnum
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ==================== Project Schemas ====================

class ProjectResponse(BaseModel):
    """Project details response"""
    id: int
    uuid: str
    team_id: int
    created_by: Optional[int] = None
    name: str
    description: Optional[str] = None
    status: ProjectStatusEnum
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    details: Optional[ProjectDetailsResponse] = None
    tasks: List[TaskResponse] = []
    task_count: int = 0

    model_config = ConfigDict(from_attributes=True)


class ProjectSummary(BaseModel):
    """Project row in team listings"""
    id: int
    uuid: str
    name: str
    status: ProjectStatusEnum
    start_date: Optional[date] = None
    due_date: Optional[date] = None


class ProjectListResponse(BaseModel):
    projects: List[ProjectSummary]
    total: int
