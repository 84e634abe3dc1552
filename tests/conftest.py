import pytest
import os
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from app.database import Base, get_db
from app.main import app
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

@event.listens_for(engine, "connect")
def _disable_pysqlite_autobegin(dbapi_connection, connection_record):
    # Let SQLAlchemy emit BEGIN itself so SAVEPOINTs nest inside the test transaction
    dbapi_connection.isolation_level = None

@event.listens_for(engine, "begin")
def _emit_begin(conn):
    conn.exec_driver_sql("BEGIN")

# Service commits and rollbacks act on a savepoint, never on the outer test transaction
TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=engine, join_transaction_mode="create_savepoint"
)

@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """Get a clean database session for each test function with rollback safety."""
    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()

@pytest.fixture(scope="function")
def make_member(db_session):
    """Factory for team members persisted in the test session."""
    from datetime import date
    from app.models.team_member import TeamMember
    import uuid

    def _make_member(full_name="Ada Lovelace", start_date=date(2020, 3, 15), current_level="Level 2", **kwargs):
        member = TeamMember(
            full_name=full_name,
            email=kwargs.pop("email", f"{uuid.uuid4().hex[:8]}@example.com"),
            start_date=start_date,
            current_level=current_level,
            **kwargs
        )
        db_session.add(member)
        db_session.commit()
        return member
    return _make_member

@pytest.fixture(scope="function")
def member(make_member):
    return make_member()

@pytest.fixture(scope="function")
def maturity_model(db_session):
    """
    Five standard levels and two categories:
    "Craft Excellence" (skills: Typography, Layout) and
    "Collaboration" (skills: Feedback, Facilitation, Mentoring).
    Every skill is described at every level. A "Product Design" model holds
    both categories and the "Product Designer" role is assessed against it.
    """
    from app.models.maturity import (
        Level, Category, Skill, CategorySkill, SkillLevel, MaturityModel, MaturityModelCategory, Role
    )

    level_names = ["Associate", "Level 1", "Level 2", "Senior Level", "Lead"]
    levels = {}
    for order, name in enumerate(level_names):
        level = Level(name=name, display_order=order)
        db_session.add(level)
        levels[name] = level
    db_session.flush()

    layout = {
        "Craft Excellence": ["Typography", "Layout"],
        "Collaboration": ["Feedback", "Facilitation", "Mentoring"],
    }
    categories, skills = {}, {}
    for cat_order, (cat_name, skill_names) in enumerate(layout.items()):
        category = Category(name=cat_name, display_order=cat_order)
        db_session.add(category)
        db_session.flush()
        categories[cat_name] = category
        for position, skill_name in enumerate(skill_names):
            skill = Skill(name=skill_name)
            skill.category_links.append(CategorySkill(category_id=category.id, display_order=position))
            for order, level in enumerate(levels.values()):
                skill.levels.append(SkillLevel(level_id=level.id, description=f"{skill_name} at {level.name}", display_order=order))
            db_session.add(skill)
            skills[skill_name] = skill

    model = MaturityModel(name="Product Design")
    for position, category in enumerate(categories.values()):
        model.category_links.append(MaturityModelCategory(category_id=category.id, display_order=position))
    role = Role(name="Product Designer", maturity_model=model)
    db_session.add_all([model, role])
    db_session.commit()

    return {
        "levels": {name: level.id for name, level in levels.items()},
        "categories": {name: category.id for name, category in categories.items()},
        "skills": {name: skill.id for name, skill in skills.items()},
        "model": model.id,
        "role": role.id,
    }

@pytest.fixture(scope="function")
def designer(make_member, maturity_model):
    """A Level 2 member whose role is assessed against the Product Design model."""
    return make_member(full_name="Dana Designer", role_id=maturity_model["role"])

@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
