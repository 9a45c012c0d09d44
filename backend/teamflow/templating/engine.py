"""
Generation Engine - instantiates a template for a team.

Flow:
1. Load the template blueprint and check the target team exists
2. Plan: check variables, compute dates, substitute placeholders (no writes)
3. Emit every project, details block and task through the sink
4. Commit once; on any write failure roll back and raise

A call either creates everything or nothing.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Mapping, Optional

from teamflow.core.exceptions import (
    GenerationPersistenceError,
    TeamNotFoundError,
    TemplateNotFoundError,
)
from teamflow.core.logging_config import logger
from teamflow.templating.planner import GenerationPlan, plan_generation
from teamflow.templating.ports import (
    GeneratedProject,
    GeneratedTask,
    GenerationSink,
    TeamDirectory,
    TemplateSource,
)


@dataclass
class GenerationResult:
    template_id: int
    team_id: int
    start_date: date
    projects: List[GeneratedProject] = field(default_factory=list)
    tasks: List[GeneratedTask] = field(default_factory=list)

    @property
    def project_count(self) -> int:
        return len(self.projects)

    @property
    def task_count(self) -> int:
        return len(self.tasks)


class GenerationEngine:
    def __init__(self, templates: TemplateSource, teams: TeamDirectory, sink: GenerationSink):
        self.templates = templates
        self.teams = teams
        self.sink = sink

    async def plan(
        self,
        template_id: int,
        team_id: int,
        start_date: date,
        variables: Mapping[str, str],
    ) -> GenerationPlan:
        """Resolve and validate everything a generation needs, without writing"""
        template = await self.templates.get_blueprint(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)

        if not await self.teams.team_exists(team_id):
            raise TeamNotFoundError(team_id)

        return plan_generation(template, start_date, variables)

    async def generate(
        self,
        template_id: int,
        team_id: int,
        start_date: date,
        variables: Mapping[str, str],
        requested_by: Optional[int] = None,
    ) -> GenerationResult:
        plan = await self.plan(template_id, team_id, start_date, variables)

        logger.log_generation_event(
            template_id, "planned",
            projects=len(plan.projects), tasks=plan.task_count, team_id=team_id,
        )

        result = GenerationResult(template_id=template_id, team_id=team_id, start_date=start_date)

        try:
            for planned_project in plan.projects:
                project = await self.sink.create_project(team_id, planned_project, created_by=requested_by)
                result.projects.append(project)

                for planned_task in planned_project.tasks:
                    task = await self.sink.create_task(project, planned_task, created_by=requested_by)
                    result.tasks.append(task)

            await self.sink.commit()
        except Exception as e:
            await self.sink.rollback()
            logger.log_error_with_context(
                e, context=f"generation from template {template_id}", team_id=team_id
            )
            raise GenerationPersistenceError(template_id) from e

        logger.log_generation_event(
            template_id, "completed",
            projects=result.project_count, tasks=result.task_count, team_id=team_id,
        )
        return result
