"""
Remote plan store over a PostgREST (Supabase) table.

What it does:
- Row-level CRUD on the plans table via httpx
- Translates rows <-> SavedPlan through store.mapping
- Turns every rejected call into BackendError carrying the backend's own
  message/details/hint so missing tables or row-level policies can be
  diagnosed without backend logs

No automatic retries.
"""

from typing import Any, Dict, List

import httpx

from studio_planner.core.errors import BackendError, PlanNotFoundError
from studio_planner.core.logging import get_logger
from studio_planner.domain.models import NewPlan, SavedPlan
from studio_planner.store import mapping
from studio_planner.store.base import PlanStore

log = get_logger("store.remote")


def _error_from_response(action: str, r: httpx.Response) -> BackendError:
    try:
        body = r.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = body.get("message") or body.get("error") or r.text
        extra = [str(body[k]) for k in ("details", "hint") if body.get(k)]
        details = "; ".join(extra) or None
    else:
        message, details = (r.text or r.reason_phrase), None

    return BackendError(f"Failed to {action} (HTTP {r.status_code}): {message}", details=details, payload=body)


def _unexpected(action: str, snippet: str) -> BackendError:
    return BackendError(f"Failed to {action}: unexpected response from plan store", details=(snippet or "")[:200])


class RemotePlanStore(PlanStore):
    backend_name = "remote"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        table: str = "plans",
        data_column: str = mapping.DEFAULT_DATA_COLUMN,
        timeout: float = 20.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.table = table
        self.data_column = data_column
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout, connect=10.0))
        self.url = f"{base_url.rstrip('/')}/rest/v1/{table}"
        self.headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    async def _request(self, action: str, method: str, *, params=None, json=None, prefer: str | None = None) -> Any:
        headers = dict(self.headers)
        if prefer:
            headers["Prefer"] = prefer
        try:
            r = await self.client.request(method, self.url, params=params, json=json, headers=headers)
        except httpx.HTTPError as e:
            log.error(f"Plan store unreachable while trying to {action}: {e}")
            raise BackendError(f"Failed to {action}: {e}", details=type(e).__name__) from e

        if 300 <= r.status_code < 400:
            location = r.headers.get("Location", "")
            err = BackendError(
                f"Failed to {action}: backend answered HTTP {r.status_code} redirect to {location or '(no location)'}",
                details="check SUPABASE_URL (scheme and host)",
            )
            log.error(str(err))
            raise err

        if not r.is_success:
            err = _error_from_response(action, r)
            log.error(str(err))
            raise err

        if not r.content:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise _unexpected(action, r.text) from e

    def _rows(self, body: Any) -> List[Dict[str, Any]]:
        if body is None:
            return []
        return body if isinstance(body, list) else [body]

    def _to_plan(self, action: str, row: Any) -> SavedPlan:
        try:
            return mapping.from_row(row, self.data_column)
        except (KeyError, TypeError, ValueError) as e:
            # ValidationError is a ValueError
            log.error(f"Malformed plan row while trying to {action}: {e}")
            raise _unexpected(action, f"{e}; row={str(row)[:120]}") from e

    async def list_plans(self) -> List[SavedPlan]:
        body = await self._request(
            "load plans", "GET", params={"select": "*", "order": "created_at.desc"}
        )
        return [self._to_plan("load plans", row) for row in self._rows(body)]

    async def create_plan(self, new: NewPlan) -> SavedPlan:
        body = await self._request(
            "save plan",
            "POST",
            json=mapping.new_row(new, self.data_column),
            prefer="return=representation",
        )
        rows = self._rows(body)
        if not rows:
            raise BackendError("Failed to save plan: backend returned no row")
        plan = self._to_plan("save plan", rows[0])
        log.info(f"Created plan {plan.id}")
        return plan

    async def update_plan(self, plan: SavedPlan) -> SavedPlan:
        body = await self._request(
            "update plan",
            "PATCH",
            params={"id": f"eq.{plan.id}"},
            json=mapping.update_row(plan, self.data_column),
            prefer="return=representation",
        )
        rows = self._rows(body)
        if not rows:
            # no row matched the filter: the plan was deleted elsewhere
            raise PlanNotFoundError(plan.id)
        updated = self._to_plan("update plan", rows[0])
        log.info(f"Updated plan {updated.id}")
        return updated

    async def delete_plan(self, plan_id: str) -> None:
        await self._request("delete plan", "DELETE", params={"id": f"eq.{plan_id}"})
        log.info(f"Deleted plan {plan_id}")

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()
