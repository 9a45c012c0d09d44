"""
Unit Tests for template and generation schemas
"""
import pytest
from datetime import date
from pydantic import ValidationError

from teamflow.schemas.project import TaskPriorityEnum
from teamflow.schemas.template import (
    GenerationRequest,
    ProjectDefinitionCreate,
    TaskDefinitionCreate,
    TemplateCreate,
    TemplateUpdate,
)


class TestTemplateCreate:

    def test_minimal(self):
        template = TemplateCreate(name="Onboarding")
        assert template.projects == []
        assert template.description is None

    def test_nested_definitions(self):
        template = TemplateCreate(
            name="Onboarding",
            projects=[{
                "name": "Onboard {employee}",
                "duration_days": 14,
                "details": {"kpis": "{kpi}", "personnel_count": 2},
                "tasks": [{"title": "Laptop", "priority": "urgent"}],
            }],
        )

        project = template.projects[0]
        assert project.start_day == 0
        assert project.details.personnel_count == 2
        assert project.tasks[0].priority == TaskPriorityEnum.URGENT

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError):
            TemplateCreate(name=name)


class TestDefinitions:

    def test_task_defaults(self):
        task = TaskDefinitionCreate(title="Laptop")

        assert task.priority == TaskPriorityEnum.MEDIUM
        assert task.start_day == 0
        assert task.duration_days == 0

    @pytest.mark.parametrize("field", ["start_day", "duration_days"])
    def test_negative_offsets_rejected(self, field):
        with pytest.raises(ValidationError):
            TaskDefinitionCreate(title="Laptop", **{field: -1})
        with pytest.raises(ValidationError):
            ProjectDefinitionCreate(name="Onboard", **{field: -1})

    @pytest.mark.parametrize("field", ["start_day", "duration_days"])
    def test_offsets_bounded(self, field):
        assert TaskDefinitionCreate(title="Laptop", **{field: 36500}).model_dump()[field] == 36500
        with pytest.raises(ValidationError):
            TaskDefinitionCreate(title="Laptop", **{field: 36501})
        with pytest.raises(ValidationError):
            ProjectDefinitionCreate(name="Onboard", **{field: 10 ** 10})

    def test_unknown_priority_rejected(self):
        with pytest.raises(ValidationError):
            TaskDefinitionCreate(title="Laptop", priority="critical")

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            TaskDefinitionCreate(title="  ")

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            ProjectDefinitionCreate(name="SEO", details={"website_page_count": -3})

    def test_keywords_plan(self):
        project = ProjectDefinitionCreate(
            name="SEO",
            details={"keywords_plan": [{"page": "/", "mainKeyword": {"keyword": "shoes", "volume": 900}}]},
        )

        entry = project.details.keywords_plan[0]
        assert entry.mainKeyword.volume == 900
        assert entry.subKeywords == []


class TestTemplateUpdate:

    def test_projects_optional(self):
        update = TemplateUpdate(name="Renamed")
        assert update.projects is None
        assert update.model_dump(exclude_unset=True) == {"name": "Renamed"}


class TestGenerationRequest:

    def test_parses_date_and_variables(self):
        request = GenerationRequest(team_id=3, start_date="2024-03-04", variables={"employee": "Ana"})

        assert request.start_date == date(2024, 3, 4)
        assert request.variables == {"employee": "Ana"}

    def test_variables_default_empty(self):
        assert GenerationRequest(team_id=3, start_date="2024-03-04").variables == {}

    @pytest.mark.parametrize("start_date", ["2024-13-01", "next monday", ""])
    def test_invalid_start_date(self, start_date):
        with pytest.raises(ValidationError):
            GenerationRequest(team_id=3, start_date=start_date)

    def test_team_id_required(self):
        with pytest.raises(ValidationError):
            GenerationRequest(start_date="2024-03-04")
