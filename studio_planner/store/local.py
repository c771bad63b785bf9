"""
Fallback plan store: the whole collection lives in one storage slot.

What it does:
- list: read + parse the slot (corrupt slot -> cleared, treated as empty)
- create: fresh id + timestamp, prepend, rewrite slot
- update: replace by id in place, PlanNotFoundError if absent
- delete: filter out id, rewrite slot (unknown id is a no-op)

Collection changes are pure functions over a list; the store does one read
and at most one write per call. Not atomic across concurrent callers, which
is fine with one active caller per device.
"""

import json
from datetime import datetime, timezone
from typing import List

from pydantic import TypeAdapter, ValidationError

from studio_planner.core.errors import PlanNotFoundError
from studio_planner.core.ids import new_id, now_iso
from studio_planner.core.logging import get_logger
from studio_planner.domain.models import NewPlan, SavedPlan
from studio_planner.store.base import PlanStore
from studio_planner.store.slots import SlotStorage

log = get_logger("store.local")

_collection = TypeAdapter(List[SavedPlan])


def _created_key(plan: SavedPlan) -> datetime:
    try:
        ts = datetime.fromisoformat(plan.created_at)
    except ValueError:
        return datetime.min.replace(tzinfo=timezone.utc)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def sort_newest_first(plans: List[SavedPlan]) -> List[SavedPlan]:
    return sorted(plans, key=_created_key, reverse=True)


def prepend_plan(plans: List[SavedPlan], plan: SavedPlan) -> List[SavedPlan]:
    return [plan, *plans]


def replace_plan(plans: List[SavedPlan], plan: SavedPlan) -> List[SavedPlan]:
    for idx, existing in enumerate(plans):
        if existing.id == plan.id:
            kept = plan.model_copy(update={"id": existing.id, "created_at": existing.created_at})
            return [*plans[:idx], kept, *plans[idx + 1:]]
    raise PlanNotFoundError(plan.id)


def remove_plan(plans: List[SavedPlan], plan_id: str) -> List[SavedPlan]:
    return [p for p in plans if p.id != plan_id]


def parse_collection(raw: str) -> List[SavedPlan]:
    return _collection.validate_python(json.loads(raw))


def serialize_collection(plans: List[SavedPlan]) -> str:
    return json.dumps([p.dump() for p in plans], ensure_ascii=False)


class LocalPlanStore(PlanStore):
    backend_name = "local"

    def __init__(self, storage: SlotStorage):
        self.storage = storage

    async def init(self) -> None:
        await self.storage.init()

    async def aclose(self) -> None:
        await self.storage.aclose()

    async def _load(self) -> List[SavedPlan]:
        raw = await self.storage.read()
        if not raw:
            return []
        try:
            return parse_collection(raw)
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            log.warning(f"Stored plans are unreadable, clearing slot: {e}")
            await self.storage.clear()
            return []

    async def _save(self, plans: List[SavedPlan]) -> None:
        await self.storage.write(serialize_collection(plans))

    async def list_plans(self) -> List[SavedPlan]:
        return sort_newest_first(await self._load())

    async def create_plan(self, new: NewPlan) -> SavedPlan:
        plan = SavedPlan(id=new_id(), created_at=now_iso(), plan_data=new.plan_data, report=new.report)
        plans = await self._load()
        await self._save(prepend_plan(plans, plan))
        log.info(f"Created plan {plan.id}")
        return plan

    async def update_plan(self, plan: SavedPlan) -> SavedPlan:
        plans = replace_plan(await self._load(), plan)
        await self._save(plans)
        log.info(f"Updated plan {plan.id}")
        return next(p for p in plans if p.id == plan.id)

    async def delete_plan(self, plan_id: str) -> None:
        plans = await self._load()
        remaining = remove_plan(plans, plan_id)
        if len(remaining) == len(plans):
            log.info(f"Delete of unknown plan {plan_id} ignored")
            return
        await self._save(remaining)
        log.info(f"Deleted plan {plan_id}")
