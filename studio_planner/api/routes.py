from typing import List

from fastapi import APIRouter, HTTPException, Request

from studio_planner.api.types import (
    ExportResponse,
    ReportResponse,
    SavePlanRequest,
    StatementRequest,
    SuggestionsResponse,
    TextResponse,
)
from studio_planner.domain.models import SWOT, NewPlan, Objective, SavedPlan, StrategicPlan, initial_plan
from studio_planner.export.exporter import DocumentExporter
from studio_planner.llm.generator import ReportGenerator
from studio_planner.store.base import PlanStore


"""
FastAPI routes for the planner.
What it provides:
- Saved plan CRUD (list / create / update / delete)
- Report and suggestion generation
- PDF export of saved or unsaved plans

And, the main purpose:
Expose the planner core over HTTP to the wizard UI.
"""

router = APIRouter()


def _store(request: Request) -> PlanStore:
    return request.app.state.store

def _generator(request: Request) -> ReportGenerator:
    return request.app.state.generator

def _exporter(request: Request) -> DocumentExporter:
    return request.app.state.exporter


def _dump(plan: SavedPlan) -> dict:
    return plan.dump()


@router.get("/plans")
async def api_list_plans(request: Request):
    plans = await _store(request).list_plans()
    # displayTitle is the list label; it is not part of the stored plan
    return [{**_dump(p), "displayTitle": p.display_title} for p in plans]

@router.get("/plans/blank")
async def api_blank_plan():
    return initial_plan().dump()

@router.post("/plans", status_code=201)
async def api_create_plan(req: SavePlanRequest, request: Request):
    saved = await _store(request).create_plan(NewPlan(plan_data=req.plan_data, report=req.report))
    return _dump(saved)

@router.put("/plans/{plan_id}")
async def api_update_plan(plan_id: str, req: SavePlanRequest, request: Request):
    # created_at is kept by the store; the value sent here is ignored
    plan = SavedPlan(id=plan_id, created_at="", plan_data=req.plan_data, report=req.report)
    saved = await _store(request).update_plan(plan)
    return _dump(saved)

@router.delete("/plans/{plan_id}")
async def api_delete_plan(plan_id: str, request: Request):
    await _store(request).delete_plan(plan_id)
    return {"ok": True}


@router.post("/reports")
async def api_generate_report(plan: StrategicPlan, request: Request):
    report = await _generator(request).generate_full_report(plan)
    return ReportResponse(report=report).dump()

@router.post("/suggestions/statement")
async def api_statement(req: StatementRequest, request: Request):
    text = await _generator(request).generate_vision_mission_text(req.kind, req.keywords, req.studio_name)
    return TextResponse(text=text).dump()

@router.post("/suggestions/goals")
async def api_goal_suggestions(swot: SWOT, request: Request):
    suggestions = await _generator(request).generate_goal_suggestions(swot)
    return SuggestionsResponse(suggestions=suggestions).dump()

@router.post("/suggestions/actions")
async def api_action_suggestions(objectives: List[Objective], request: Request):
    suggestions = await _generator(request).generate_action_suggestions(objectives)
    return SuggestionsResponse(suggestions=suggestions).dump()


async def _export(request: Request, plan_data: StrategicPlan, report: str) -> dict:
    path = await _exporter(request).export_report(plan_data, report)
    if path is None:
        raise HTTPException(409, "An export is already in progress")
    return ExportResponse(filename=path.name, path=str(path)).dump()

@router.post("/plans/{plan_id}/export")
async def api_export_saved(plan_id: str, request: Request):
    plans = await _store(request).list_plans()
    plan = next((p for p in plans if p.id == plan_id), None)
    if not plan:
        raise HTTPException(404, "plan not found")
    return await _export(request, plan.plan_data, plan.report)

@router.post("/exports")
async def api_export_unsaved(req: SavePlanRequest, request: Request):
    return await _export(request, req.plan_data, req.report)
