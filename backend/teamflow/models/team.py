"""Team models - groups of users that own projects"""
from sqlalchemy import Column, String, DateTime, Enum as SQLEnum, Integer, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
import enum

from teamflow.core.database import Base
from teamflow.core.types import utcnow


class TeamRole(str, enum.Enum):
    """Roles within a team"""
    LEADER = "leader"
    MEMBER = "member"


class Team(Base):
    """Team model"""
    __tablename__ = "teams"

    __table_args__ = (
        Index('ix_teams_created_by', 'created_by'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    creator = relationship("User", foreign_keys=[created_by])
    members = relationship("TeamMember", back_populates="team", cascade="all, delete-orphan")
    projects = relationship("Project", back_populates="team", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Team {self.name}>"


class TeamMember(Base):
    """Team member - links users to teams with roles"""
    __tablename__ = "team_members"

    __table_args__ = (
        Index('ix_team_members_team_user', 'team_id', 'user_id', unique=True),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    role = Column(SQLEnum(TeamRole), default=TeamRole.MEMBER, nullable=False)

    joined_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    team = relationship("Team", back_populates="members")
    user = relationship("User", back_populates="team_memberships")

    def __repr__(self):
        return f"<TeamMember {self.user_id} in {self.team_id}>"
