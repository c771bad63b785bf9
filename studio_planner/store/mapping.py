"""
Translation between SavedPlan and the remote row shape.

The row keeps the plan JSON under a column (default "plan_data") whose name
differs from the external "planData" key. These functions are the only place
that knows about it; from_row(to_row(p)) == p for every plan.
"""

from typing import Any, Dict

from studio_planner.domain.models import NewPlan, SavedPlan, StrategicPlan

DEFAULT_DATA_COLUMN = "plan_data"


def plan_to_json(plan: StrategicPlan) -> Dict[str, Any]:
    return plan.dump()


def new_row(new: NewPlan, data_column: str = DEFAULT_DATA_COLUMN) -> Dict[str, Any]:
    return {data_column: plan_to_json(new.plan_data), "report": new.report}


def update_row(plan: SavedPlan, data_column: str = DEFAULT_DATA_COLUMN) -> Dict[str, Any]:
    # id and created_at are immutable, never sent on update
    return {data_column: plan_to_json(plan.plan_data), "report": plan.report}


def to_row(plan: SavedPlan, data_column: str = DEFAULT_DATA_COLUMN) -> Dict[str, Any]:
    row = {"id": plan.id, "created_at": plan.created_at}
    row.update(update_row(plan, data_column))
    return row


def from_row(row: Dict[str, Any], data_column: str = DEFAULT_DATA_COLUMN) -> SavedPlan:
    if data_column not in row:
        raise KeyError(f"Row {row.get('id')!r} has no {data_column!r} column")
    return SavedPlan(
        id=str(row["id"]),
        created_at=str(row["created_at"]),
        plan_data=StrategicPlan.model_validate(row[data_column]),
        report=row.get("report") or "",
    )
