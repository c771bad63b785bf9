"""
Plan data model and it defines:
- StrategicPlan (vision, mission, SWOT, OKRs, quarterly actions)
- SavedPlan (persisted snapshot + generated report)
- NewPlan (input of a create)

External JSON uses camelCase keys (studioName, keyResults, planData...),
attributes are snake_case. Both spellings are accepted on input.
"""


from datetime import date
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

QUARTERS = ("Q1", "Q2", "Q3", "Q4")

Quarter = Literal["Q1", "Q2", "Q3", "Q4"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def dump(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class KeyResult(CamelModel):
    title: str = ""


class Objective(CamelModel):
    title: str = ""
    key_results: List[KeyResult] = Field(default_factory=list)


class SWOT(CamelModel):
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)
    threats: List[str] = Field(default_factory=list)


class QuarterlyAction(CamelModel):
    quarter: Quarter
    actions: List[str] = Field(default_factory=list)


def _default_quarters() -> List[QuarterlyAction]:
    return [QuarterlyAction(quarter=q, actions=[]) for q in QUARTERS]


class StrategicPlan(CamelModel):
    studio_name: str = ""
    planning_year: str = ""  # free-form, never parsed
    vision: str = ""
    mission: str = ""
    swot: SWOT = Field(default_factory=SWOT)
    objectives: List[Objective] = Field(default_factory=list)
    quarterly_actions: List[QuarterlyAction] = Field(default_factory=_default_quarters)

    @field_validator("quarterly_actions")
    @classmethod
    def _four_fixed_quarters(cls, v: List[QuarterlyAction]) -> List[QuarterlyAction]:
        tags = tuple(q.quarter for q in v)
        if tags != QUARTERS:
            raise ValueError(f"quarterly actions must be exactly {list(QUARTERS)} in order, got {list(tags)}")
        return v


class NewPlan(CamelModel):
    plan_data: StrategicPlan
    report: str = ""


class SavedPlan(CamelModel):
    id: str
    created_at: str
    plan_data: StrategicPlan
    report: str = ""

    @property
    def display_title(self) -> str:
        title = self.plan_data.studio_name or "Untitled plan"
        if self.plan_data.planning_year:
            title += f" ({self.plan_data.planning_year})"
        return title


def initial_plan(year: str | None = None) -> StrategicPlan:
    """Blank wizard state: one empty entry per list, four empty quarters."""
    return StrategicPlan(
        planning_year=year if year is not None else str(date.today().year),
        swot=SWOT(strengths=[""], weaknesses=[""], opportunities=[""], threats=[""]),
        objectives=[Objective(title="", key_results=[KeyResult(title="")])],
        quarterly_actions=[QuarterlyAction(quarter=q, actions=[""]) for q in QUARTERS],
    )
