"""Loads templates from the database as blueprints"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from teamflow.models.template import Template, TemplateProject
from teamflow.templating.blueprint import (
    DetailsBlueprint,
    ProjectBlueprint,
    TaskBlueprint,
    TemplateBlueprint,
)
from teamflow.templating.ports import TemplateSource


def template_to_blueprint(template: Template) -> TemplateBlueprint:
    """Map a Template with its projects and tasks loaded onto a blueprint"""
    return TemplateBlueprint(
        id=template.id,
        name=template.name,
        description=template.description,
        projects=[
            ProjectBlueprint(
                id=project.id,
                name=project.name,
                description=project.description,
                start_day=project.start_day,
                duration_days=project.duration_days,
                details=DetailsBlueprint.from_dict(project.details),
                tasks=[
                    TaskBlueprint(
                        id=task.id,
                        title=task.title,
                        description=task.description,
                        priority=task.priority.value,
                        start_day=task.start_day,
                        duration_days=task.duration_days,
                    )
                    for task in project.tasks
                ],
            )
            for project in template.projects
        ],
    )


class SqlAlchemyTemplateSource(TemplateSource):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_blueprint(self, template_id: int) -> Optional[TemplateBlueprint]:
        result = await self.db.execute(
            select(Template)
            .options(selectinload(Template.projects).selectinload(TemplateProject.tasks))
            .where(Template.id == template_id)
            .execution_options(populate_existing=True)
        )
        template = result.scalar_one_or_none()
        if template is None:
            return None
        return template_to_blueprint(template)
