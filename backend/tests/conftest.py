"""
Shared fixtures: sample profiles, roles, roadmaps, opportunities and an
in-memory database wired into the FastAPI app.
"""
import pytest
import httpx
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from launchpad.schemas import Milestone, Opportunity, Phase, Roadmap, UserProfile
from launchpad.services.role_catalog import RoleProfile


def make_role(**overrides) -> RoleProfile:
    """Build a RoleProfile with harmless defaults."""
    fields = dict(
        id="test-role",
        name="Test Role",
        summary="A role used in tests",
        description="A role used in tests",
        required_skills=(),
        preferred_skills=(),
        typical_tools=(),
        typical_stack="",
        responsibilities=(),
        example_projects=(),
        career_trajectory="",
        min_experience_level=0,
        related_roles=(),
    )
    fields.update(overrides)
    return RoleProfile(**fields)


def make_opportunity(**overrides) -> Opportunity:
    fields = dict(
        id="opp-test",
        title="Software Engineering Intern",
        company="Acme",
        type="internship",
        role_type="Software Engineer",
        required_skills=["python", "git", "sql", "docker"],
        preferred_skills=["react", "aws"],
        level="Intern",
        location_type="Remote",
    )
    fields.update(overrides)
    return Opportunity(**fields)


@pytest.fixture
def student_profile() -> UserProfile:
    """Beginner student with a small web/data skill set."""
    return UserProfile(
        name="Sam",
        major="Computer Science",
        user_type="student",
        interests=["web development", "data"],
        current_skills=["JavaScript", "Python", "SQL", "git", "HTML", "CSS"],
        experience_level="beginner",
        graduation_timeline="May 2026",
        location="Austin, TX",
        target_roles=["Software Engineer"],
    )


@pytest.fixture
def empty_profile() -> UserProfile:
    """Profile with nothing filled in."""
    return UserProfile()


@pytest.fixture
def sample_roadmap() -> Roadmap:
    return Roadmap(
        tracks=["Software Engineer"],
        phases=[
            Phase(
                id="phase-1",
                name="Foundations",
                milestones=[
                    Milestone(id="m1", name="Learn Docker", skills=["Docker", "Linux"], status="completed"),
                    Milestone(id="m2", name="Build an API", skills=["APIs", "FastAPI"], status="in_progress"),
                    Milestone(id="m3", name="Cloud basics", skills=["AWS"], status="not_started"),
                ],
            ),
            Phase(
                id="phase-2",
                name="Projects",
                milestones=[
                    Milestone(id="m4", name="Portfolio site", skills=["React"], status="not_started"),
                ],
            ),
        ],
    )


@pytest.fixture
async def db_session():
    """Fresh in-memory SQLite database per test."""
    from launchpad.database import Base
    from launchpad.models import Profile  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
async def client(db_session):
    """HTTP client for the app, backed by the in-memory database."""
    from launchpad.database import get_db
    from launchpad.main import app

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
