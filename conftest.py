"""
Shared fixtures — point the app at in-memory SQLite before anything imports it.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from sqlalchemy import insert

from app.core.database import engine
from app.models.tables import Base, Member, Team

TEAMS = [
    {"team_id": 1, "name": "teamX"},
    {"team_id": 2, "name": "teamY"},
]

MEMBERS = [
    {"member_id": 1, "username": "alice", "age": 10, "team_id": 1},
    {"member_id": 2, "username": "bob", "age": 20, "team_id": 1},
    {"member_id": 3, "username": "carl", "age": 30, "team_id": 2},
    {"member_id": 4, "username": "dana", "age": 40, "team_id": 2},
]

TEAMLESS = {"member_id": 5, "username": "erin", "age": 25, "team_id": None}


@pytest.fixture
def db():
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)


@pytest.fixture
def seeded(db):
    """alice/bob in teamX, carl/dana in teamY."""
    with db.begin() as conn:
        conn.execute(insert(Team), TEAMS)
        conn.execute(insert(Member), MEMBERS)
    return db


@pytest.fixture
def seeded_with_teamless(seeded):
    """The four team members plus erin, who has no team."""
    with seeded.begin() as conn:
        conn.execute(insert(Member), [TEAMLESS])
    return seeded
