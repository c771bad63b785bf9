"""Tests for plan store backend selection."""

import pytest

from studio_planner.core.config import Settings
from studio_planner.store.factory import build_plan_store
from studio_planner.store.local import LocalPlanStore
from studio_planner.store.remote import RemotePlanStore
from studio_planner.store.slots import MemorySlotStorage


def test_remote_when_url_and_key_present():
    cfg = Settings(SUPABASE_URL="https://x.supabase.co", SUPABASE_ANON_KEY="k")
    store = build_plan_store(cfg)
    assert isinstance(store, RemotePlanStore)
    assert store.url == "https://x.supabase.co/rest/v1/plans"


@pytest.mark.parametrize(
    "url,key",
    [("", ""), ("https://x.supabase.co", ""), ("", "k"), ("   ", "k")],
)
def test_local_when_remote_incomplete(url, key):
    cfg = Settings(SUPABASE_URL=url, SUPABASE_ANON_KEY=key)
    storage = MemorySlotStorage()
    store = build_plan_store(cfg, storage=storage)
    assert isinstance(store, LocalPlanStore)
    assert store.storage is storage
