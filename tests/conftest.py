"""Shared fixtures for studio_planner tests."""

import pytest

from studio_planner.domain.models import StrategicPlan
from studio_planner.store.local import LocalPlanStore
from studio_planner.store.slots import MemorySlotStorage

from helpers import make_plan


@pytest.fixture
def plan() -> StrategicPlan:
    return make_plan()


@pytest.fixture
def storage() -> MemorySlotStorage:
    return MemorySlotStorage("pilates_strategic_plans")


@pytest.fixture
def local_store(storage: MemorySlotStorage) -> LocalPlanStore:
    return LocalPlanStore(storage)
