"""Pydantic schemas for teams"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import datetime
from enum import Enum


class TeamRoleEnum(str, Enum):
    LEADER = "leader"
    MEMBER = "member"


class TeamCreate(BaseModel):
    """Create a new team; the creator becomes its leader"""
    name: str = Field(..., min_length=2, max_length=255, description="Team name")
    description: Optional[str] = Field(None, max_length=1000)


class TeamMemberResponse(BaseModel):
    """Team member details"""
    user_id: int
    role: TeamRoleEnum
    joined_at: datetime

    # User info (populated from relationship)
    user_email: Optional[str] = None
    user_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class TeamResponse(BaseModel):
    """Team details response"""
    id: int
    created_by: Optional[int] = None
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    members: List[TeamMemberResponse] = []
    member_count: int = 0

    model_config = ConfigDict(from_attributes=True)


class TeamListResponse(BaseModel):
    """List of teams response"""
    teams: List[TeamResponse]
    total: int
