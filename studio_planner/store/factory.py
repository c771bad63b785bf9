"""
Backend selection, done once at startup.

Remote when both SUPABASE_URL and SUPABASE_ANON_KEY are set, otherwise the
fallback slot store.
"""

import httpx

from studio_planner.core.config import Settings
from studio_planner.core.logging import get_logger
from studio_planner.store.base import PlanStore
from studio_planner.store.local import LocalPlanStore
from studio_planner.store.remote import RemotePlanStore
from studio_planner.store.slots import SlotStorage, SqlSlotStorage

log = get_logger("store.factory")


def build_plan_store(
    cfg: Settings,
    *,
    client: httpx.AsyncClient | None = None,
    storage: SlotStorage | None = None,
) -> PlanStore:
    if cfg.remote_configured:
        log.info(f"Using remote plan store at {cfg.SUPABASE_URL} (table={cfg.PLANS_TABLE})")
        return RemotePlanStore(
            cfg.SUPABASE_URL,
            cfg.SUPABASE_ANON_KEY,
            table=cfg.PLANS_TABLE,
            data_column=cfg.PLANS_DATA_COLUMN,
            timeout=cfg.REMOTE_TIMEOUT_SECONDS,
            client=client,
        )

    if storage is None:
        storage = SqlSlotStorage.from_url(cfg.LOCAL_DATABASE_URL, cfg.LOCAL_STORE_KEY)
    log.info(f"Remote plan store not configured, using local slot {cfg.LOCAL_STORE_KEY!r}")
    return LocalPlanStore(storage)
