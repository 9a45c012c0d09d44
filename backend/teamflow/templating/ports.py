"""
Storage seams for the generation engine.

The engine only talks to these interfaces. The SQLAlchemy implementations
live in ``teamflow.repositories``; tests plug in in-memory fakes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from teamflow.templating.blueprint import TemplateBlueprint
from teamflow.templating.planner import PlannedProject, PlannedTask


@dataclass
class GeneratedProject:
    id: int
    uuid: str
    team_id: int
    name: str
    description: Optional[str]
    status: str
    start_date: date
    due_date: date
    details: Optional[Dict[str, Any]] = None


@dataclass
class GeneratedTask:
    id: int
    uuid: str
    project_id: int
    title: str
    description: Optional[str]
    priority: str
    status: str
    start_date: date
    due_date: date


class TemplateSource(ABC):
    @abstractmethod
    async def get_blueprint(self, template_id: int) -> Optional[TemplateBlueprint]:
        """Fully hydrated template, or None when it does not exist"""


class TeamDirectory(ABC):
    @abstractmethod
    async def team_exists(self, team_id: int) -> bool:
        ...


class GenerationSink(ABC):
    """Unit of work receiving generated rows.

    Nothing written through a sink is visible to other callers until
    ``commit``; ``rollback`` discards everything written since the last commit.
    """

    @abstractmethod
    async def create_project(
        self, team_id: int, planned: PlannedProject, created_by: Optional[int] = None
    ) -> GeneratedProject:
        """Insert the project together with its details block, if any"""

    @abstractmethod
    async def create_task(
        self, project: GeneratedProject, planned: PlannedTask, created_by: Optional[int] = None
    ) -> GeneratedTask:
        ...

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...
