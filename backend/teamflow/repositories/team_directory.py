from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teamflow.models.team import Team
from teamflow.templating.ports import TeamDirectory


class SqlAlchemyTeamDirectory(TeamDirectory):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def team_exists(self, team_id: int) -> bool:
        result = await self.db.execute(select(Team.id).where(Team.id == team_id))
        return result.scalar_one_or_none() is not None
