"""
Shared pytest fixtures.

Provides fresh fakes for every port plus a FastAPI app/TestClient whose
dependencies are overridden with those fakes.

Usage:
    def test_something(client, workout_repo):
        response = client.post("/workouts", json={...})
        assert workout_repo.get_all()
"""

from typing import Any, Callable, Dict

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api import deps
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeSoundCatalog, FakeTrainingRepository, FakeWorkoutRepository


# =============================================================================
# Override Helpers
# =============================================================================


def override_dependency(app: FastAPI, getter: Callable[..., Any], implementation: Any) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Example:
        override_dependency(app, deps.get_workout_repo, FakeWorkoutRepository())
    """
    app.dependency_overrides[getter] = lambda: implementation


# =============================================================================
# Port Fakes
# =============================================================================


@pytest.fixture
def workout_repo() -> FakeWorkoutRepository:
    """Fresh fake workout repository."""
    return FakeWorkoutRepository()


@pytest.fixture
def training_repo() -> FakeTrainingRepository:
    """Fresh fake training repository."""
    return FakeTrainingRepository()


@pytest.fixture
def sound_catalog() -> FakeSoundCatalog:
    """Fake catalog knowing the keys "beep" and "chime"."""
    return FakeSoundCatalog(keys=["beep", "chime"], base_url="https://cdn.test")


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the local .env file."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def app_with_fakes(
    test_settings: Settings,
    workout_repo: FakeWorkoutRepository,
    training_repo: FakeTrainingRepository,
    sound_catalog: FakeSoundCatalog,
) -> Dict[str, Any]:
    """
    App with every repository dependency overridden by fakes.

    Returns a dict with the app and the fake instances for seeding test data.
    """
    app = create_app(settings=test_settings)
    override_dependency(app, deps.get_settings, test_settings)
    override_dependency(app, deps.get_workout_repo, workout_repo)
    override_dependency(app, deps.get_training_repo, training_repo)
    override_dependency(app, deps.get_sound_catalog, sound_catalog)

    yield {
        "app": app,
        "workout_repo": workout_repo,
        "training_repo": training_repo,
        "sound_catalog": sound_catalog,
    }

    app.dependency_overrides.clear()


@pytest.fixture
def client(app_with_fakes: Dict[str, Any]) -> TestClient:
    """TestClient for the app with fakes."""
    return TestClient(app_with_fakes["app"])
