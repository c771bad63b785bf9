"""Shared builders for studio_planner tests."""

import random

from studio_planner.domain.models import (
    SWOT,
    KeyResult,
    Objective,
    QuarterlyAction,
    SavedPlan,
    StrategicPlan,
)


def make_plan(name: str = "Ana Pilates", year: str = "2024") -> StrategicPlan:
    return StrategicPlan(
        studio_name=name,
        planning_year=year,
        vision="Be the reference studio in the neighbourhood",
        mission="Movement with care",
        swot=SWOT(
            strengths=["Certified instructors", ""],
            weaknesses=["Small room"],
            opportunities=["Corporate wellness"],
            threats=["New gym nearby"],
        ),
        objectives=[
            Objective(title="Grow loyal clients", key_results=[KeyResult(title="80% renewals"), KeyResult(title="")]),
            Objective(title="", key_results=[]),
        ],
        quarterly_actions=[
            QuarterlyAction(quarter="Q1", actions=["Referral programme"]),
            QuarterlyAction(quarter="Q2", actions=["Summer campaign", ""]),
            QuarterlyAction(quarter="Q3", actions=[]),
            QuarterlyAction(quarter="Q4", actions=["Year-end event"]),
        ],
    )


def make_saved(plan_id: str, created_at: str, name: str = "Ana Pilates") -> SavedPlan:
    return SavedPlan(id=plan_id, created_at=created_at, plan_data=make_plan(name), report=f"# Report {plan_id}")


_WORDS = ["Pilates", "reformer", "client", "growth", "Ação", "estúdio", "Q1", "|", '"', "\\", "", " ", "**bold**", "🧘", "2024/25"]


def _text(rng: random.Random, max_words: int = 4) -> str:
    return " ".join(rng.choice(_WORDS) for _ in range(rng.randint(0, max_words)))


def _texts(rng: random.Random, max_items: int = 4) -> list[str]:
    return [_text(rng) for _ in range(rng.randint(0, max_items))]


def random_plan(seed: int) -> StrategicPlan:
    """Deterministic plan for a seed, including empty titles and unicode."""
    rng = random.Random(seed)
    return StrategicPlan(
        studio_name=_text(rng),
        planning_year=rng.choice(["2024", "", "24/25", "next year", _text(rng, 1)]),
        vision=_text(rng, 12),
        mission=_text(rng, 12),
        swot=SWOT(
            strengths=_texts(rng),
            weaknesses=_texts(rng),
            opportunities=_texts(rng),
            threats=_texts(rng),
        ),
        objectives=[
            Objective(title=_text(rng), key_results=[KeyResult(title=t) for t in _texts(rng)])
            for _ in range(rng.randint(0, 4))
        ],
        quarterly_actions=[QuarterlyAction(quarter=q, actions=_texts(rng)) for q in ("Q1", "Q2", "Q3", "Q4")],
    )
