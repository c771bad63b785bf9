"""
Report and suggestion generation.

ReportGenerator.generate(kind, payload) is the single capability the rest of
the app depends on; the text function is injected so tests can swap in a
deterministic stub for the live model.
"""

from typing import Any, Awaitable, Callable, List, Literal

from studio_planner.core.errors import ReportGenerationError
from studio_planner.core.logging import get_logger
from studio_planner.domain.models import SWOT, Objective, StrategicPlan
from studio_planner.llm import prompts  # noqa: F401  (registers prompt builders)
from studio_planner.llm.registry import build_prompt
from studio_planner.llm.router import LLMError, llm_text

log = get_logger("llm.generator")

TextFn = Callable[[str], Awaitable[str]]


def split_suggestions(text: str) -> List[str]:
    return [s.strip() for s in (text or "").strip().split("|") if s.strip()]


class ReportGenerator:
    def __init__(self, text_fn: TextFn = llm_text):
        self.text_fn = text_fn

    async def generate(self, kind: str, payload: Any) -> str:
        prompt = build_prompt(kind, payload)
        try:
            return await self.text_fn(prompt)
        except LLMError as e:
            log.error(f"Generation of {kind} failed: {e}")
            raise ReportGenerationError(f"Failed to generate {kind.replace('_', ' ')}.") from e

    async def generate_full_report(self, plan: StrategicPlan) -> str:
        return await self.generate("report", plan)

    async def generate_vision_mission_text(
        self,
        kind: Literal["vision", "mission"],
        keywords: List[str],
        studio_name: str,
    ) -> str:
        if not keywords:
            return ""
        text = await self.generate(kind, {"keywords": keywords, "studio_name": studio_name})
        return text.strip()

    async def generate_goal_suggestions(self, swot: SWOT) -> List[str]:
        return split_suggestions(await self.generate("goal_suggestions", swot))

    async def generate_action_suggestions(self, objectives: List[Objective]) -> List[str]:
        return split_suggestions(await self.generate("action_suggestions", objectives))
