"""
Error types shared by the store, exporter and generator.

What it defines:
- Backend (remote store) failures with diagnostic detail
- Not-found on update
- Export failures
- Report generation failures

Main purpose:
One place for the failures callers are expected to surface to the user.
"""

from typing import Any


class PlannerError(RuntimeError):
    pass


class BackendError(PlannerError):
    """Remote store call rejected (network, permission policy, missing table...)."""

    def __init__(self, message: str, details: str | None = None, payload: Any = None):
        self.details = details
        self.payload = payload
        text = message
        if details:
            text = f"{message} (details: {details})"
        super().__init__(text)


class PlanNotFoundError(PlannerError):
    def __init__(self, plan_id: str):
        self.plan_id = plan_id
        super().__init__(f"Plan not found: {plan_id}")


class ExportError(PlannerError):
    pass


class ReportGenerationError(PlannerError):
    pass
