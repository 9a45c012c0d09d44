"""
Teams API

Teams own projects. Templates generate into a team, so a team must exist
before anything can be generated for it.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from teamflow.core.database import get_db
from teamflow.core.exceptions import AuthorizationError, TeamNotFoundError
from teamflow.core.logging_config import logger
from teamflow.models.user import User, UserRole
from teamflow.models.project import Project
from teamflow.models.team import Team, TeamMember, TeamRole
from teamflow.modules.auth.dependencies import get_current_user
from teamflow.schemas.project import ProjectListResponse, ProjectStatusEnum, ProjectSummary
from teamflow.schemas.team import (
    TeamCreate, TeamResponse, TeamListResponse, TeamMemberResponse, TeamRoleEnum
)


router = APIRouter()


# ==================== Helper Functions ====================

async def get_team_or_404(team_id: int, db: AsyncSession) -> Team:
    """Get team with members, or raise TeamNotFoundError"""
    result = await db.execute(
        select(Team)
        .options(selectinload(Team.members).selectinload(TeamMember.user))
        .where(Team.id == team_id)
    )
    team = result.scalar_one_or_none()
    if not team:
        raise TeamNotFoundError(team_id)
    return team


def ensure_team_access(team: Team, user: User) -> None:
    """Admins and managers see every team, everyone else only their own"""
    if user.role in (UserRole.ADMIN, UserRole.MANAGER):
        return
    if not any(member.user_id == user.id for member in team.members):
        raise AuthorizationError("You are not a member of this team")


def build_team_response(team: Team) -> TeamResponse:
    members = [
        TeamMemberResponse(
            user_id=m.user_id,
            role=TeamRoleEnum(m.role.value),
            joined_at=m.joined_at,
            user_email=m.user.email if m.user else None,
            user_name=m.user.full_name if m.user else None,
        )
        for m in team.members
    ]
    return TeamResponse(
        id=team.id,
        created_by=team.created_by,
        name=team.name,
        description=team.description,
        created_at=team.created_at,
        updated_at=team.updated_at,
        members=members,
        member_count=len(members),
    )


# ==================== Team Endpoints ====================

@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
async def create_team(
    team_data: TeamCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Create a team; the creator joins it as leader"""
    team = Team(
        name=team_data.name,
        description=team_data.description,
        created_by=current_user.id,
    )
    db.add(team)
    await db.flush()

    db.add(TeamMember(team_id=team.id, user_id=current_user.id, role=TeamRole.LEADER))
    await db.commit()

    logger.info(f"Created team {team.id} '{team.name}' by user {current_user.id}")

    team = await get_team_or_404(team.id, db)
    return build_team_response(team)


@router.get("", response_model=TeamListResponse)
async def list_my_teams(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Teams the current user belongs to"""
    result = await db.execute(
        select(Team)
        .join(TeamMember, TeamMember.team_id == Team.id)
        .options(selectinload(Team.members).selectinload(TeamMember.user))
        .where(TeamMember.user_id == current_user.id)
        .order_by(Team.id)
    )
    teams = result.scalars().unique().all()
    return TeamListResponse(
        teams=[build_team_response(t) for t in teams],
        total=len(teams),
    )


@router.get("/{team_id}", response_model=TeamResponse)
async def get_team(
    team_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    team = await get_team_or_404(team_id, db)
    ensure_team_access(team, current_user)
    return build_team_response(team)


@router.get("/{team_id}/projects", response_model=ProjectListResponse)
async def list_team_projects(
    team_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Projects owned by a team, oldest first"""
    team = await get_team_or_404(team_id, db)
    ensure_team_access(team, current_user)

    result = await db.execute(
        select(Project).where(Project.team_id == team_id).order_by(Project.id)
    )
    projects = result.scalars().all()

    return ProjectListResponse(
        projects=[
            ProjectSummary(
                id=p.id,
                uuid=p.uuid,
                name=p.name,
                status=ProjectStatusEnum(p.status.value),
                start_date=p.start_date,
                due_date=p.due_date,
            )
            for p in projects
        ],
        total=len(projects),
    )
