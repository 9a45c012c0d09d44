"""
Generation planning: turns a template blueprint plus variables and a start
date into the exact projects and tasks to create.

Planning is pure and runs to completion before anything is written, so every
input error surfaces while the database is still untouched.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Mapping, Optional

from teamflow.core.exceptions import MissingVariableError
from teamflow.templating.blueprint import DetailsBlueprint, TemplateBlueprint
from teamflow.templating.placeholders import extract_placeholders, substitute
from teamflow.templating.schedule import offset_window


@dataclass
class PlannedTask:
    title: str
    description: Optional[str]
    priority: str
    start_date: date
    due_date: date
    definition_id: Optional[int] = None


@dataclass
class PlannedProject:
    name: str
    description: Optional[str]
    start_date: date
    due_date: date
    details: Optional[DetailsBlueprint] = None
    tasks: List[PlannedTask] = field(default_factory=list)
    definition_id: Optional[int] = None


@dataclass
class GenerationPlan:
    template_id: Optional[int]
    start_date: date
    projects: List[PlannedProject] = field(default_factory=list)

    @property
    def task_count(self) -> int:
        return sum(len(project.tasks) for project in self.projects)


def check_variables(template: TemplateBlueprint, variables: Mapping[str, str]) -> List[str]:
    """Return the template's placeholder names, failing on the first one without a value"""
    required = extract_placeholders(template)
    for name in required:
        if name not in variables:
            raise MissingVariableError(name)
    return required


def plan_generation(
    template: TemplateBlueprint,
    start_date: date,
    variables: Mapping[str, str],
) -> GenerationPlan:
    check_variables(template, variables)

    def render(text: Optional[str]) -> Optional[str]:
        return substitute(text, variables)

    plan = GenerationPlan(template_id=template.id, start_date=start_date)

    for definition in template.projects:
        window = offset_window(start_date, definition.start_day, definition.duration_days)
        project = PlannedProject(
            name=render(definition.name),
            description=render(definition.description),
            start_date=window.start_date,
            due_date=window.due_date,
            details=definition.details.map_text(render) if definition.details is not None else None,
            definition_id=definition.id,
        )

        for task_definition in definition.tasks:
            task_window = offset_window(
                window.start_date, task_definition.start_day, task_definition.duration_days
            )
            project.tasks.append(PlannedTask(
                title=render(task_definition.title),
                description=render(task_definition.description),
                priority=task_definition.priority,
                start_date=task_window.start_date,
                due_date=task_window.due_date,
                definition_id=task_definition.id,
            ))

        plan.projects.append(project)

    return plan
