"""
Template Service - Business logic for templates

Handles:
- Template CRUD with nested project and task definitions
- Placeholder discovery
- Generating projects and tasks for a team
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from datetime import date
from typing import List, Mapping, Optional

from teamflow.core.config import settings
from teamflow.core.exceptions import TemplateNotFoundError, ValidationError
from teamflow.core.logging_config import logger, set_template_id
from teamflow.core.types import utcnow
from teamflow.models.task import TaskPriority
from teamflow.models.template import Template, TemplateProject, TemplateTask
from teamflow.repositories import (
    SqlAlchemyGenerationSink,
    SqlAlchemyTeamDirectory,
    SqlAlchemyTemplateSource,
    template_to_blueprint,
)
from teamflow.schemas.template import ProjectDefinitionCreate, TemplateCreate, TemplateUpdate
from teamflow.templating import GenerationEngine, GenerationResult, extract_placeholders


class TemplateService:
    """Service for managing templates and generating from them"""

    # ==================== TEMPLATE CRUD ====================

    async def list_templates(self, db: AsyncSession) -> List[Template]:
        result = await db.execute(
            select(Template).order_by(Template.created_at.desc(), Template.id.desc())
        )
        return list(result.scalars().all())

    async def get_template(self, db: AsyncSession, template_id: int) -> Template:
        """Get template with every definition loaded, or raise TemplateNotFoundError"""
        result = await db.execute(
            select(Template)
            .options(selectinload(Template.projects).selectinload(TemplateProject.tasks))
            .where(Template.id == template_id)
            .execution_options(populate_existing=True)
        )
        template = result.scalar_one_or_none()
        if not template:
            raise TemplateNotFoundError(template_id)
        return template

    async def create_template(
        self,
        db: AsyncSession,
        template_data: TemplateCreate,
        created_by_id: Optional[int] = None
    ) -> Template:
        """
        Create a template with its project and task definitions

        Args:
            db: Database session
            template_data: Template creation data
            created_by_id: User creating the template

        Returns:
            Created Template with definitions loaded
        """
        self._check_limits(template_data.projects)

        template = Template(
            name=template_data.name,
            description=template_data.description,
            created_by=created_by_id,
            projects=self._build_projects(template_data.projects),
        )

        db.add(template)
        await db.commit()

        logger.info(
            f"Created template {template.id} '{template.name}' "
            f"with {len(template_data.projects)} project definitions"
        )
        return await self.get_template(db, template.id)

    async def update_template(
        self,
        db: AsyncSession,
        template_id: int,
        template_data: TemplateUpdate
    ) -> Template:
        """Update template fields; a supplied ``projects`` list replaces all definitions"""
        template = await self.get_template(db, template_id)
        changes = template_data.model_dump(exclude_unset=True)

        if "name" in changes:
            if template_data.name is None or not template_data.name.strip():
                raise ValidationError("Template name must not be blank", field="name")
            template.name = template_data.name

        if "description" in changes:
            template.description = template_data.description

        if template_data.projects is not None:
            self._check_limits(template_data.projects)
            template.projects = self._build_projects(template_data.projects)

        template.updated_at = utcnow()
        await db.commit()

        logger.info(f"Updated template {template_id} ({', '.join(changes) or 'no fields'})")
        return await self.get_template(db, template_id)

    async def delete_template(self, db: AsyncSession, template_id: int) -> None:
        """Delete template and its definitions. Generated projects are not touched."""
        template = await self.get_template(db, template_id)
        await db.delete(template)
        await db.commit()

        logger.info(f"Deleted template {template_id}")

    # ==================== PLACEHOLDERS & GENERATION ====================

    async def get_placeholders(self, db: AsyncSession, template_id: int) -> List[str]:
        template = await self.get_template(db, template_id)
        return extract_placeholders(template_to_blueprint(template))

    def build_engine(self, db: AsyncSession) -> GenerationEngine:
        return GenerationEngine(
            templates=SqlAlchemyTemplateSource(db),
            teams=SqlAlchemyTeamDirectory(db),
            sink=SqlAlchemyGenerationSink(db),
        )

    async def generate(
        self,
        db: AsyncSession,
        template_id: int,
        team_id: int,
        start_date: date,
        variables: Mapping[str, str],
        requested_by: Optional[int] = None
    ) -> GenerationResult:
        """
        Create every project, details block and task the template defines

        Raises:
            TemplateNotFoundError / TeamNotFoundError: unknown ids
            MissingVariableError: a placeholder has no value (nothing written)
            GenerationPersistenceError: a write failed (everything rolled back)
        """
        set_template_id(str(template_id))
        engine = self.build_engine(db)
        return await engine.generate(
            template_id,
            team_id,
            start_date,
            variables,
            requested_by=requested_by,
        )

    # ==================== HELPERS ====================

    def _check_limits(self, projects: List[ProjectDefinitionCreate]) -> None:
        if len(projects) > settings.MAX_TEMPLATE_PROJECTS:
            raise ValidationError(
                f"A template may define at most {settings.MAX_TEMPLATE_PROJECTS} projects",
                field="projects",
            )
        for project in projects:
            if len(project.tasks) > settings.MAX_TEMPLATE_TASKS_PER_PROJECT:
                raise ValidationError(
                    f"Project '{project.name}' defines more than "
                    f"{settings.MAX_TEMPLATE_TASKS_PER_PROJECT} tasks",
                    field="tasks",
                )

    def _build_projects(self, projects: List[ProjectDefinitionCreate]) -> List[TemplateProject]:
        return [
            TemplateProject(
                position=position,
                name=project.name,
                description=project.description,
                start_day=project.start_day,
                duration_days=project.duration_days,
                details=project.details.model_dump(exclude_none=True) if project.details else None,
                tasks=[
                    TemplateTask(
                        position=task_position,
                        title=task.title,
                        description=task.description,
                        priority=TaskPriority(task.priority.value),
                        start_day=task.start_day,
                        duration_days=task.duration_days,
                    )
                    for task_position, task in enumerate(project.tasks)
                ],
            )
            for position, project in enumerate(projects)
        ]


# Singleton instance
template_service = TemplateService()
