# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Table mappings for teams and their members. Read-only from this service.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Team(Base):
    __tablename__ = "team"

    team_id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)


class Member(Base):
    __tablename__ = "member"

    member_id = Column(Integer, primary_key=True)
    username = Column(String(255), nullable=False, index=True)
    age = Column(Integer, nullable=False)
    team_id = Column(Integer, ForeignKey("team.team_id"), nullable=True)
