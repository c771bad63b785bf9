"""
Caller-side view of the saved plans.

What it does:
- Keeps the visible list and the id of the plan being edited
- Saves as create or update depending on whether an id is set
- Deletes optimistically: the entry disappears at once and comes back in
  its original position if the store rejects the delete

This is the client-side API for in-process front ends (a desktop or
notebook UI driving the wizard): the HTTP routes are stateless and leave view
state to the browser, which follows the same snapshot-and-restore rule.

One library per session; it does not guard against concurrent calls for the
same id.
"""

from typing import List, Optional

from studio_planner.core.logging import get_logger
from studio_planner.domain.models import NewPlan, SavedPlan, StrategicPlan
from studio_planner.store.base import PlanStore

log = get_logger("services.library")


class PlanLibrary:
    def __init__(self, store: PlanStore):
        self.store = store
        self.plans: List[SavedPlan] = []
        self.current_id: Optional[str] = None

    async def refresh(self) -> List[SavedPlan]:
        self.plans = await self.store.list_plans()
        return self.plans

    def entries(self) -> List[dict]:
        """Rows for the saved-plans list: id, label and save date."""
        return [
            {"id": p.id, "title": p.display_title, "saved_at": p.created_at[:10]}
            for p in self.plans
        ]

    def get(self, plan_id: str) -> Optional[SavedPlan]:
        return next((p for p in self.plans if p.id == plan_id), None)

    def load(self, plan_id: str) -> SavedPlan:
        plan = self.get(plan_id)
        if plan is None:
            raise KeyError(f"Plan {plan_id} is not in the list")
        self.current_id = plan.id
        return plan

    def start_over(self) -> None:
        self.current_id = None

    async def save(self, plan_data: StrategicPlan, report: str) -> SavedPlan:
        if not report:
            raise ValueError("Generate a report before saving the plan")

        existing = self.get(self.current_id) if self.current_id else None
        if self.current_id:
            created_at = existing.created_at if existing else ""
            saved = await self.store.update_plan(
                SavedPlan(id=self.current_id, created_at=created_at, plan_data=plan_data, report=report)
            )
            self.plans = [saved if p.id == saved.id else p for p in self.plans]
            if existing is None:
                self.plans = [saved, *self.plans]
        else:
            saved = await self.store.create_plan(NewPlan(plan_data=plan_data, report=report))
            self.plans = [saved, *self.plans]

        self.current_id = saved.id
        return saved

    async def delete(self, plan_id: str) -> None:
        snapshot = list(self.plans)
        self.plans = [p for p in self.plans if p.id != plan_id]
        try:
            await self.store.delete_plan(plan_id)
        except Exception:
            log.warning(f"Delete of {plan_id} failed, restoring list")
            self.plans = snapshot
            raise
        if self.current_id == plan_id:
            self.current_id = None
