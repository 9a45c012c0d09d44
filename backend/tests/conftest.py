"""
TeamFlow - Test Configuration and Fixtures
"""
import os
from typing import AsyncGenerator
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool
from faker import Faker

# Set testing environment
os.environ['ENVIRONMENT'] = 'testing'
os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///./test_teamflow.db'
os.environ['SECRET_KEY'] = 'test-secret-key-for-testing-only'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing'
os.environ['RATE_LIMIT_ENABLED'] = 'false'
os.environ['BCRYPT_ROUNDS'] = '4'

from teamflow.main import app
from teamflow.core.database import Base, get_db
from teamflow.core.security import get_password_hash, create_access_token
from teamflow.models.user import User, UserRole
from teamflow.models.team import Team, TeamMember, TeamRole

fake = Faker()

# Test database setup
TEST_DATABASE_URL = 'sqlite+aiosqlite:///./test_teamflow.db'
test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)
TestSessionLocal = async_sessionmaker(
    bind=test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)


@pytest.fixture(scope='function')
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test"""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session
        await session.rollback()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


async def create_user(db_session: AsyncSession, role: UserRole, password: str = 'testpassword123') -> User:
    user = User(
        email=fake.unique.email(),
        hashed_password=get_password_hash(password),
        full_name=fake.name(),
        role=role,
        is_active=True,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


def headers_for(user: User) -> dict:
    token_data = {
        'sub': str(user.id),
        'email': user.email,
        'role': user.role.value
    }
    token = create_access_token(token_data)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a member test user"""
    return await create_user(db_session, UserRole.MEMBER)


@pytest.fixture
async def manager_user(db_session: AsyncSession) -> User:
    """Create a manager test user"""
    return await create_user(db_session, UserRole.MANAGER, password='managerpassword123')


@pytest.fixture
async def admin_user(db_session: AsyncSession) -> User:
    """Create an admin test user"""
    return await create_user(db_session, UserRole.ADMIN, password='adminpassword123')


@pytest.fixture
def auth_headers(test_user: User) -> dict:
    """Generate authentication headers for test user"""
    return headers_for(test_user)


@pytest.fixture
def manager_auth_headers(manager_user: User) -> dict:
    return headers_for(manager_user)


@pytest.fixture
async def outsider_auth_headers(db_session: AsyncSession) -> dict:
    """Headers for a member who belongs to no team"""
    return headers_for(await create_user(db_session, UserRole.MEMBER))


@pytest.fixture
def admin_auth_headers(admin_user: User) -> dict:
    """Generate authentication headers for admin user"""
    return headers_for(admin_user)


@pytest.fixture
async def team(db_session: AsyncSession, test_user: User) -> Team:
    """A team led by the member test user"""
    team = Team(name=fake.company(), description="Client delivery team", created_by=test_user.id)
    db_session.add(team)
    await db_session.flush()
    db_session.add(TeamMember(team_id=team.id, user_id=test_user.id, role=TeamRole.LEADER))
    await db_session.commit()
    await db_session.refresh(team)
    return team


@pytest.fixture
def onboarding_template_data() -> dict:
    """Two-project onboarding template with employee/manager placeholders"""
    return {
        "name": "Employee Onboarding",
        "description": "Onboarding plan for {employee}",
        "projects": [
            {
                "name": "Onboard {employee}",
                "description": "Owned by {manager}",
                "start_day": 0,
                "duration_days": 14,
                "tasks": [
                    {"title": "Laptop setup for {employee}", "priority": "high", "start_day": 0, "duration_days": 1},
                    {"title": "Meet {manager}", "start_day": 2, "duration_days": 0},
                ],
            },
            {
                "name": "Training",
                "start_day": 7,
                "duration_days": 7,
                "details": {
                    "product_info": "Internal tools used by {employee}",
                    "personnel_count": 3,
                    "keywords_plan": [
                        {
                            "page": "/welcome",
                            "mainKeyword": {"keyword": "onboarding", "volume": 120},
                            "subKeywords": [{"keyword": "first week", "volume": 40}],
                        }
                    ],
                },
                "tasks": [
                    {"title": "Security course", "description": "Assigned by {manager}", "start_day": 1, "duration_days": 3},
                ],
            },
        ],
    }
