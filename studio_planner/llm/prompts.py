"""
Prompt templates for the report and suggestion calls.

Each builder is registered under the kind the generator asks for. Empty
list entries, objectives and key results are dropped before formatting.
"""

from typing import Any, Dict, List

from studio_planner.core.config import settings
from studio_planner.domain.models import SWOT, Objective, QuarterlyAction, StrategicPlan
from studio_planner.llm.registry import register


# --------------------------------------------------
# Formatting helpers
# --------------------------------------------------

def format_list(items: List[str]) -> str:
    return "\n".join(f"- {item}" for item in items if item.strip())


def format_objectives(objectives: List[Objective]) -> str:
    blocks = []
    for obj in objectives:
        if not obj.title.strip():
            continue
        key_results = "\n".join(f"  - {kr.title}" for kr in obj.key_results if kr.title.strip())
        blocks.append(f"**Objective:** {obj.title}\n**Key Results:**\n{key_results}")
    return "\n\n".join(blocks)


def format_quarters(quarters: List[QuarterlyAction]) -> str:
    blocks = []
    for q in quarters:
        actions = "\n".join(f"- {a}" for a in q.actions if a.strip())
        blocks.append(f"**{q.quarter}:**\n{actions}")
    return "\n\n".join(blocks)


def format_swot(swot: SWOT) -> str:
    return f"""**Strengths:**
{format_list(swot.strengths)}

**Weaknesses:**
{format_list(swot.weaknesses)}

**Opportunities:**
{format_list(swot.opportunities)}

**Threats:**
{format_list(swot.threats)}"""


CONSULTANT = "You are a business consultant specialised in marketing and management for Pilates studios."

PIPE_RULE = 'separated by the "|" character. Do not add numbers, bullets or any other formatting.'


# --------------------------------------------------
# Statements (vision / mission)
# --------------------------------------------------

STATEMENT_LABELS = {
    "vision": "an inspiring Vision statement",
    "mission": "a clear and objective Mission statement",
}


def _statement(kind: str, payload: Dict[str, Any]) -> str:
    label = STATEMENT_LABELS[kind]
    keywords = ", ".join(payload.get("keywords") or [])
    studio = payload.get("studio_name") or ""
    return f"""{CONSULTANT}
Write {label} for a Pilates studio called "{studio}".
It must be concise, professional and inspiring, and be based on these concepts chosen by the owner:

**Key concepts:** {keywords}

**Instructions:**
1. Combine the concepts naturally and cohesively.
2. Do not write a list; write a single paragraph of 2 to 3 sentences.
3. The tone is warm and professional, reflecting a studio focused on well-being.
4. Write in {settings.REPORT_LANGUAGE}.
"""


@register("vision")
def vision_prompt(payload: Dict[str, Any]) -> str:
    return _statement("vision", payload)


@register("mission")
def mission_prompt(payload: Dict[str, Any]) -> str:
    return _statement("mission", payload)


# --------------------------------------------------
# Suggestions
# --------------------------------------------------

@register("goal_suggestions")
def goal_suggestions_prompt(swot: SWOT) -> str:
    return f"""{CONSULTANT}
Analyse this studio's SWOT and suggest 3 to 5 strategic objectives (OKRs) for next year.

**SWOT analysis:**
{format_swot(swot)}

**Instructions:**
1. Objectives must be actionable and inspiring.
2. Leverage strengths, address weaknesses, explore opportunities and mitigate threats.
3. List ONLY the objective titles, each {PIPE_RULE}
4. Write in {settings.REPORT_LANGUAGE}.

**Example output:** Grow the base of loyal clients|Launch specialised class programmes|Improve the studio's digital presence
"""


@register("action_suggestions")
def action_suggestions_prompt(objectives: List[Objective]) -> str:
    return f"""{CONSULTANT}
Analyse these Objectives and Key Results and suggest 5 to 8 practical quarterly actions to reach them.

**Objectives and Key Results:**
{format_objectives(objectives)}

**Instructions:**
1. Actions must be concrete, specific and realistic for a Pilates studio.
2. Each action must fit within one quarter.
3. List ONLY the action descriptions, each {PIPE_RULE} Do not say which objective it belongs to.
4. Write in {settings.REPORT_LANGUAGE}.

**Example output:** Run a summer marketing campaign|Create a client referral programme|Post 3 times a week on social media
"""


# --------------------------------------------------
# Full report
# --------------------------------------------------

@register("report")
def report_prompt(plan: StrategicPlan) -> str:
    year = plan.planning_year
    return f"""{CONSULTANT}
Write a complete, professional Annual Strategic Plan in Markdown based on the data below.
The tone is inspiring, strategic and practical. Use headings, subheadings, bold and lists.

**Studio name:** {plan.studio_name}
**Planning year:** {year}
**Vision:** {plan.vision}
**Mission:** {plan.mission}

**SWOT analysis:**
{format_swot(plan.swot)}

**Annual strategic objectives (OKRs):**
{format_objectives(plan.objectives)}

**Quarterly action plan:**
{format_quarters(plan.quarterly_actions)}

**Instructions:**
1. **Executive summary:** open with a paragraph summarising the purpose of the plan for {year}.
2. **Structure:** Vision and Mission, Strategic Analysis (SWOT), Objectives and Key Results, Quarterly Action Plan.
3. **Detailed SWOT:** comment briefly on each item with how to leverage, mitigate, explore or protect.
4. **Connected narrative:** show how actions and objectives realise the vision and mission given the SWOT.
5. **Motivating conclusion:** close by encouraging the owner to execute the plan with focus.
6. **Format:** use Markdown (# for main titles, ## for subtitles, - for lists).
7. Write in {settings.REPORT_LANGUAGE}.

Now write the full report for {year}.
"""
