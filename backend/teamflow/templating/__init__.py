from teamflow.templating.blueprint import (
    DETAILS_TEXT_FIELDS,
    DetailsBlueprint,
    ProjectBlueprint,
    TaskBlueprint,
    TemplateBlueprint,
)
from teamflow.templating.placeholders import extract_placeholders, find_placeholders, substitute
from teamflow.templating.planner import GenerationPlan, PlannedProject, PlannedTask, plan_generation
from teamflow.templating.engine import GenerationEngine, GenerationResult

__all__ = [
    "DETAILS_TEXT_FIELDS",
    "DetailsBlueprint",
    "ProjectBlueprint",
    "TaskBlueprint",
    "TemplateBlueprint",
    "extract_placeholders",
    "find_placeholders",
    "substitute",
    "GenerationPlan",
    "PlannedProject",
    "PlannedTask",
    "plan_generation",
    "GenerationEngine",
    "GenerationResult",
]
