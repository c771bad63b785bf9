"""
Plan store interface.

Both backends expose the same four operations and return the same
SavedPlan shape, so callers never branch on which one is configured.
"""

from abc import ABC, abstractmethod
from typing import List

from studio_planner.domain.models import NewPlan, SavedPlan


class PlanStore(ABC):
    backend_name: str = "abstract"

    @abstractmethod
    async def list_plans(self) -> List[SavedPlan]:
        """All saved plans, newest created_at first."""

    @abstractmethod
    async def create_plan(self, new: NewPlan) -> SavedPlan:
        """Persist a new plan; the store assigns id and created_at."""

    @abstractmethod
    async def update_plan(self, plan: SavedPlan) -> SavedPlan:
        """Overwrite plan data and report of an existing id."""

    @abstractmethod
    async def delete_plan(self, plan_id: str) -> None:
        """Remove a plan. Deleting an unknown id is not an error."""

    async def init(self) -> None:
        return None

    async def aclose(self) -> None:
        return None
