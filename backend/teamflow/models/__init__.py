# Re-export all models for convenient imports
from teamflow.models.user import User, UserRole
from teamflow.models.team import Team, TeamMember, TeamRole
from teamflow.models.project import Project, ProjectDetails, ProjectStatus
from teamflow.models.task import Task, TaskStatus, TaskPriority
from teamflow.models.template import Template, TemplateProject, TemplateTask

__all__ = [
    # User
    "User",
    "UserRole",
    # Team
    "Team",
    "TeamMember",
    "TeamRole",
    # Project
    "Project",
    "ProjectDetails",
    "ProjectStatus",
    # Task
    "Task",
    "TaskStatus",
    "TaskPriority",
    # Templates
    "Template",
    "TemplateProject",
    "TemplateTask",
]
