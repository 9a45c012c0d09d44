"""
Template blueprints - plain dataclasses the generation engine works on.

Repositories hydrate these from the database; the extractor and planner
never see ORM objects, so they can be exercised without a session.
"""

from copy import deepcopy
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Dict, List, Optional, Tuple


# Text fields of the details block, in scan order. All may hold placeholders.
DETAILS_TEXT_FIELDS: Tuple[str, ...] = (
    "product_info",
    "platform_accounts",
    "image_folder_link",
    "brand_guideline_link",
    "customer_notes",
    "kpis",
    "personnel_levels",
    "content_strategy",
    "cluster_model",
    "internal_link_plan",
)


@dataclass
class DetailsBlueprint:
    """Optional briefing attached to a project definition"""

    product_info: Optional[str] = None
    platform_accounts: Optional[str] = None
    image_folder_link: Optional[str] = None
    brand_guideline_link: Optional[str] = None
    customer_notes: Optional[str] = None
    kpis: Optional[str] = None
    personnel_count: Optional[int] = None
    personnel_levels: Optional[str] = None
    content_strategy: Optional[str] = None
    website_page_count: Optional[int] = None
    keywords_plan: Optional[List[Dict[str, Any]]] = None
    cluster_model: Optional[str] = None
    internal_link_plan: Optional[str] = None

    def text_fields(self) -> List[Tuple[str, Optional[str]]]:
        return [(name, getattr(self, name)) for name in DETAILS_TEXT_FIELDS]

    def map_text(self, render: Callable[[Optional[str]], Optional[str]]) -> "DetailsBlueprint":
        """Copy with every text field passed through ``render``.

        Numeric fields are carried over; keywords_plan is copied unchanged.
        """
        return replace(
            self,
            keywords_plan=deepcopy(self.keywords_plan),
            **{name: render(value) for name, value in self.text_fields()},
        )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["DetailsBlueprint"]:
        if data is None:
            return None
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class TaskBlueprint:
    title: str
    description: Optional[str] = None
    priority: str = "medium"
    start_day: int = 0  # relative to its project's start
    duration_days: int = 0
    id: Optional[int] = None


@dataclass
class ProjectBlueprint:
    name: str
    description: Optional[str] = None
    start_day: int = 0  # relative to the generation start date
    duration_days: int = 0
    tasks: List[TaskBlueprint] = field(default_factory=list)
    details: Optional[DetailsBlueprint] = None
    id: Optional[int] = None


@dataclass
class TemplateBlueprint:
    """A fully hydrated template, read-only for the duration of a generation"""

    name: str
    description: Optional[str] = None
    projects: List[ProjectBlueprint] = field(default_factory=list)
    id: Optional[int] = None
