from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from teamflow.core.database import get_db
from teamflow.core.exceptions import ProjectNotFoundError
from teamflow.models.user import User
from teamflow.models.project import Project
from teamflow.models.team import Team, TeamMember
from teamflow.modules.auth.dependencies import get_current_user
from teamflow.schemas.project import (
    ProjectDetailsResponse,
    ProjectResponse,
    ProjectStatusEnum,
    TaskPriorityEnum,
    TaskResponse,
    TaskStatusEnum,
)
from teamflow.api.v1.endpoints.teams import ensure_team_access


router = APIRouter()


def build_project_response(project: Project) -> ProjectResponse:
    tasks = [
        TaskResponse(
            id=t.id,
            uuid=t.uuid,
            project_id=t.project_id,
            reporter_id=t.reporter_id,
            assignee_id=t.assignee_id,
            title=t.title,
            description=t.description,
            status=TaskStatusEnum(t.status.value),
            priority=TaskPriorityEnum(t.priority.value),
            start_date=t.start_date,
            due_date=t.due_date,
            created_at=t.created_at,
        )
        for t in project.tasks
    ]
    return ProjectResponse(
        id=project.id,
        uuid=project.uuid,
        team_id=project.team_id,
        created_by=project.created_by,
        name=project.name,
        description=project.description,
        status=ProjectStatusEnum(project.status.value),
        start_date=project.start_date,
        due_date=project.due_date,
        created_at=project.created_at,
        updated_at=project.updated_at,
        details=ProjectDetailsResponse.model_validate(project.details) if project.details else None,
        tasks=tasks,
        task_count=len(tasks),
    )


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Project with its details block and tasks"""
    result = await db.execute(
        select(Project)
        .options(
            selectinload(Project.tasks),
            selectinload(Project.details),
            selectinload(Project.team).selectinload(Team.members).selectinload(TeamMember.user),
        )
        .where(Project.id == project_id)
    )
    project = result.scalar_one_or_none()
    if not project:
        raise ProjectNotFoundError(project_id)

    ensure_team_access(project.team, current_user)
    return build_project_response(project)
