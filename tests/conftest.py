"""
Pytest Configuration and Shared Fixtures
Version: 1.0.0
Purpose: Provide reusable test fixtures and configuration for all tests
"""

import pytest
import tempfile
import shutil
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Generator, List
import sys

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from propdesk_engine.config import get_engine_config
from propdesk_engine.preferences_store import InMemoryStore, PreferencesStore
from propdesk_engine.project_model import ProjectOwner, ProjectRecord


# ============================================================================
# Session-scoped fixtures (run once per test session)
# ============================================================================

@pytest.fixture(scope="session")
def project_root_path() -> Path:
    """Return the project root directory path."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def engine_config() -> dict:
    """Return the engine configuration dictionary."""
    return get_engine_config()


# ============================================================================
# Function-scoped fixtures (run for each test)
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test."""
    temp_path = Path(tempfile.mkdtemp(prefix="propdesk_test_"))
    yield temp_path
    if temp_path.exists():
        shutil.rmtree(temp_path)


@pytest.fixture
def raw_store() -> InMemoryStore:
    """Empty in-memory key-value store."""
    return InMemoryStore()


@pytest.fixture
def prefs(raw_store: InMemoryStore) -> PreferencesStore:
    """Preference store backed by the in-memory store."""
    return PreferencesStore(raw_store)


@pytest.fixture
def today() -> date:
    """Fixed 'today' so due-date windows are deterministic."""
    return date(2026, 3, 10)


def make_project(id, title="Project", today=date(2026, 3, 10), **overrides) -> ProjectRecord:
    """Build a ProjectRecord with sensible defaults."""
    data = dict(
        id=id,
        title=title,
        status="active",
        priority_level=3,
        document_type="RFP",
        agency=None,
        due_date=today + timedelta(days=30),
        created_at=datetime(2026, 1, 1, 9, 0, 0),
        owner=ProjectOwner(id=1, name="Alice Johnson", email="alice.johnson@agency.gov", avatar="A"),
        progress_percentage=0,
        health_status="green",
        team_size=1,
    )
    data.update(overrides)
    return ProjectRecord(**data)


@pytest.fixture
def project_factory(today):
    """Factory fixture returning make_project bound to the fixed today."""
    def _factory(id, title="Project", **overrides):
        return make_project(id, title, today=today, **overrides)
    return _factory


@pytest.fixture
def sample_projects(today) -> List[ProjectRecord]:
    """A small mixed portfolio covering every filter dimension."""
    return [
        make_project(1, "Navy Logistics Support", today=today, status="active", priority_level=1,
                     document_type="RFP", agency="Department of the Navy",
                     due_date=today + timedelta(days=5), created_at=datetime(2026, 1, 5),
                     progress_percentage=40, health_status="yellow", team_size=6,
                     owner=ProjectOwner(id=2, name="Bob Williams")),
        make_project(2, "cloud migration", today=today, status="draft", priority_level=2,
                     document_type="SOW", agency="GSA",
                     due_date=today + timedelta(days=15), created_at=datetime(2026, 2, 1),
                     progress_percentage=10, health_status="green", team_size=3,
                     owner=ProjectOwner(id=3, name="carol Martinez")),
        make_project(3, "Army Training Range", today=today, status="submitted", priority_level=3,
                     document_type="PWS", agency="U.S. Army",
                     due_date=today - timedelta(days=2), created_at=datetime(2025, 12, 20),
                     progress_percentage=100, health_status="red", team_size=9,
                     owner=ProjectOwner(id=4, name="David Chen")),
        make_project(4, "Border Sensor Network", today=today, status="overdue", priority_level=1,
                     document_type="RFI", agency=None,
                     due_date=today + timedelta(days=40), created_at=datetime(2026, 2, 20),
                     progress_percentage=75, health_status="green", team_size=2,
                     owner=ProjectOwner(id=1, name="Alice Johnson")),
    ]


# ============================================================================
# Pytest hooks for custom behavior
# ============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast tests with no filesystem or network access")
    config.addinivalue_line("markers", "persistence: Tests that write preference files to disk")


def pytest_collection_modifyitems(config, items):
    """Mark tests automatically by directory and fixture usage."""
    for item in items:
        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)
        if "temp_dir" in getattr(item, "fixturenames", ()):
            item.add_marker(pytest.mark.persistence)


def pytest_report_header(config):
    """Add custom header to test report."""
    from propdesk_engine import __version__
    return [
        f"Proposal Desk Engine Test Suite v{__version__}",
        f"Project root: {project_root}",
    ]
