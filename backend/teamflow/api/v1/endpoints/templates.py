"""
Templates API

Admins maintain templates; admins and managers can browse them and generate
a full set of projects and tasks for a team from one.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from teamflow.core.database import get_db
from teamflow.core.rate_limiter import generation_rate_limit
from teamflow.models.user import User, UserRole
from teamflow.models.template import Template
from teamflow.modules.auth.dependencies import require_roles
from teamflow.schemas.project import TaskPriorityEnum
from teamflow.schemas.template import (
    GeneratedProjectResponse,
    GeneratedTaskResponse,
    GenerationRequest,
    GenerationResponse,
    PlaceholderListResponse,
    ProjectDefinitionResponse,
    TaskDefinitionResponse,
    TemplateCreate,
    TemplateListResponse,
    TemplateResponse,
    TemplateSummary,
    TemplateUpdate,
)
from teamflow.services.template_service import template_service
from teamflow.templating import GenerationResult


router = APIRouter()

template_reader = require_roles(UserRole.ADMIN, UserRole.MANAGER)
template_writer = require_roles(UserRole.ADMIN)


def build_template_response(template: Template) -> TemplateResponse:
    return TemplateResponse(
        id=template.id,
        name=template.name,
        description=template.description,
        created_by=template.created_by,
        created_at=template.created_at,
        updated_at=template.updated_at,
        projects=[
            ProjectDefinitionResponse(
                id=p.id,
                name=p.name,
                description=p.description,
                start_day=p.start_day,
                duration_days=p.duration_days,
                details=p.details,
                tasks=[
                    TaskDefinitionResponse(
                        id=t.id,
                        title=t.title,
                        description=t.description,
                        priority=TaskPriorityEnum(t.priority.value),
                        start_day=t.start_day,
                        duration_days=t.duration_days,
                    )
                    for t in p.tasks
                ],
            )
            for p in template.projects
        ],
    )


def build_generation_response(result: GenerationResult) -> GenerationResponse:
    return GenerationResponse(
        template_id=result.template_id,
        team_id=result.team_id,
        start_date=result.start_date,
        projects=[GeneratedProjectResponse.model_validate(p) for p in result.projects],
        tasks=[GeneratedTaskResponse.model_validate(t) for t in result.tasks],
        project_count=result.project_count,
        task_count=result.task_count,
    )


# ==================== Template CRUD ====================

@router.get("", response_model=TemplateListResponse)
async def list_templates(
    current_user: User = Depends(template_reader),
    db: AsyncSession = Depends(get_db)
):
    templates = await template_service.list_templates(db)
    return TemplateListResponse(
        templates=[TemplateSummary.model_validate(t) for t in templates],
        total=len(templates),
    )


@router.post("", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_template(
    template_data: TemplateCreate,
    current_user: User = Depends(template_writer),
    db: AsyncSession = Depends(get_db)
):
    template = await template_service.create_template(db, template_data, created_by_id=current_user.id)
    return build_template_response(template)


@router.get("/{template_id}", response_model=TemplateResponse)
async def get_template(
    template_id: int,
    current_user: User = Depends(template_reader),
    db: AsyncSession = Depends(get_db)
):
    template = await template_service.get_template(db, template_id)
    return build_template_response(template)


@router.put("/{template_id}", response_model=TemplateResponse)
async def update_template(
    template_id: int,
    template_data: TemplateUpdate,
    current_user: User = Depends(template_writer),
    db: AsyncSession = Depends(get_db)
):
    template = await template_service.update_template(db, template_id, template_data)
    return build_template_response(template)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
    template_id: int,
    current_user: User = Depends(template_writer),
    db: AsyncSession = Depends(get_db)
):
    await template_service.delete_template(db, template_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==================== Placeholders & Generation ====================

@router.get("/{template_id}/placeholders", response_model=PlaceholderListResponse)
async def get_template_placeholders(
    template_id: int,
    current_user: User = Depends(template_reader),
    db: AsyncSession = Depends(get_db)
):
    """Variable names a generation request must supply, in first-appearance order"""
    placeholders = await template_service.get_placeholders(db, template_id)
    return PlaceholderListResponse(template_id=template_id, placeholders=placeholders)


@router.post(
    "/{template_id}/generate",
    response_model=GenerationResponse,
    status_code=status.HTTP_201_CREATED,
)
@generation_rate_limit()
async def generate_from_template(
    request: Request,
    template_id: int,
    generation: GenerationRequest,
    current_user: User = Depends(template_reader),
    db: AsyncSession = Depends(get_db)
):
    """
    Create every project, details block and task defined by the template
    for ``generation.team_id``. Either all rows are created or none are.
    """
    result = await template_service.generate(
        db,
        template_id,
        team_id=generation.team_id,
        start_date=generation.start_date,
        variables=generation.variables,
        requested_by=current_user.id,
    )
    return build_generation_response(result)
