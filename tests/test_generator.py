"""Tests for prompt building and the report generator capability."""

import pytest

from studio_planner.core.errors import ReportGenerationError
from studio_planner.domain.models import SWOT
from studio_planner.llm.generator import ReportGenerator, split_suggestions
from studio_planner.llm.prompts import format_list, format_objectives, format_quarters
from studio_planner.llm.registry import PROMPTS, build_prompt
from studio_planner.llm.router import LLMError

from helpers import make_plan


class StubText:
    def __init__(self, reply: str = "stub"):
        self.reply = reply
        self.prompts = []

    async def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.reply


def test_all_kinds_registered():
    assert {"report", "vision", "mission", "goal_suggestions", "action_suggestions"} <= set(PROMPTS)


def test_unknown_kind():
    with pytest.raises(KeyError):
        build_prompt("haiku", {})


def test_formatters_skip_empty_entries():
    plan = make_plan()
    assert format_list(["a", " ", "", "b"]) == "- a\n- b"
    objectives = format_objectives(plan.objectives)
    assert "Grow loyal clients" in objectives
    assert objectives.count("**Objective:**") == 1
    assert "  - 80% renewals" in objectives
    quarters = format_quarters(plan.quarterly_actions)
    assert "**Q2:**\n- Summer campaign" in quarters
    assert "**Q3:**\n" in quarters


def test_report_prompt_carries_plan_data():
    prompt = build_prompt("report", make_plan())
    assert "Ana Pilates" in prompt
    assert "2024" in prompt
    assert "- New gym nearby" in prompt
    assert "Year-end event" in prompt


@pytest.mark.asyncio
async def test_full_report_returns_model_text():
    stub = StubText("# Plan\n\nbody")
    report = await ReportGenerator(stub).generate_full_report(make_plan())
    assert report == "# Plan\n\nbody"
    assert len(stub.prompts) == 1


@pytest.mark.asyncio
async def test_statement_without_keywords_skips_model():
    stub = StubText()
    assert await ReportGenerator(stub).generate_vision_mission_text("vision", [], "Ana") == ""
    assert stub.prompts == []


@pytest.mark.asyncio
async def test_statement_is_trimmed_and_uses_keywords():
    stub = StubText("  A calm place.  \n")
    text = await ReportGenerator(stub).generate_vision_mission_text("mission", ["care", "health"], "Ana")
    assert text == "A calm place."
    assert "care, health" in stub.prompts[0]
    assert "Mission" in stub.prompts[0]


@pytest.mark.asyncio
async def test_suggestions_are_split_on_pipes():
    stub = StubText(" Grow clients | Launch classes||  ")
    gen = ReportGenerator(stub)
    assert await gen.generate_goal_suggestions(SWOT(strengths=["x"])) == ["Grow clients", "Launch classes"]
    assert await gen.generate_action_suggestions(make_plan().objectives) == ["Grow clients", "Launch classes"]


def test_split_suggestions_empty():
    assert split_suggestions("   ") == []


@pytest.mark.asyncio
async def test_llm_failure_becomes_generation_error():
    async def failing(prompt: str) -> str:
        raise LLMError("Gemini error 401: bad key")

    with pytest.raises(ReportGenerationError, match="report"):
        await ReportGenerator(failing).generate_full_report(make_plan())
