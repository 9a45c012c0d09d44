from teamflow.repositories.template_source import SqlAlchemyTemplateSource, template_to_blueprint
from teamflow.repositories.team_directory import SqlAlchemyTeamDirectory
from teamflow.repositories.generation_sink import SqlAlchemyGenerationSink

__all__ = [
    "SqlAlchemyTemplateSource",
    "template_to_blueprint",
    "SqlAlchemyTeamDirectory",
    "SqlAlchemyGenerationSink",
]
