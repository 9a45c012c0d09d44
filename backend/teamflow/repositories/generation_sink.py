"""
Writes generated projects, details and tasks into the request's session.

Rows are flushed as they are created so ids are available for the response
and for child rows, but nothing is committed until the engine calls
``commit``.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from teamflow.models.project import Project, ProjectDetails, ProjectStatus
from teamflow.models.task import Task, TaskPriority, TaskStatus
from teamflow.templating.planner import PlannedProject, PlannedTask
from teamflow.templating.ports import GeneratedProject, GeneratedTask, GenerationSink


class SqlAlchemyGenerationSink(GenerationSink):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_project(
        self, team_id: int, planned: PlannedProject, created_by: Optional[int] = None
    ) -> GeneratedProject:
        project = Project(
            team_id=team_id,
            created_by=created_by,
            name=planned.name,
            description=planned.description,
            status=ProjectStatus.PLANNING,
            start_date=planned.start_date,
            due_date=planned.due_date,
        )
        self.db.add(project)
        await self.db.flush()

        details = None
        if planned.details is not None:
            details = planned.details.to_dict()
            self.db.add(ProjectDetails(project_id=project.id, **details))
            await self.db.flush()

        return GeneratedProject(
            id=project.id,
            uuid=project.uuid,
            team_id=project.team_id,
            name=project.name,
            description=project.description,
            status=project.status.value,
            start_date=project.start_date,
            due_date=project.due_date,
            details=details,
        )

    async def create_task(
        self, project: GeneratedProject, planned: PlannedTask, created_by: Optional[int] = None
    ) -> GeneratedTask:
        task = Task(
            project_id=project.id,
            reporter_id=created_by,
            title=planned.title,
            description=planned.description,
            status=TaskStatus.TODO,
            priority=TaskPriority(planned.priority),
            start_date=planned.start_date,
            due_date=planned.due_date,
        )
        self.db.add(task)
        await self.db.flush()

        return GeneratedTask(
            id=task.id,
            uuid=task.uuid,
            project_id=task.project_id,
            title=task.title,
            description=task.description,
            priority=task.priority.value,
            status=task.status.value,
            start_date=task.start_date,
            due_date=task.due_date,
        )

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()
