"""
API request and response schemas.
What it defines:
- Save payloads (plan data + report)
- Suggestion inputs
- Response formats

And, the main purpose:
Ensure structured communication between client and server.
"""


from typing import List, Literal

from pydantic import Field

from studio_planner.domain.models import CamelModel, StrategicPlan

class SavePlanRequest(CamelModel):
    plan_data: StrategicPlan
    report: str = Field(..., min_length=1)

class StatementRequest(CamelModel):
    kind: Literal["vision", "mission"]
    keywords: List[str] = []
    studio_name: str = ""

class ReportResponse(CamelModel):
    report: str

class TextResponse(CamelModel):
    text: str

class SuggestionsResponse(CamelModel):
    suggestions: List[str]

class ExportResponse(CamelModel):
    filename: str
    path: str
