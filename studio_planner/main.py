from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from studio_planner.api.routes import router
from studio_planner.core.config import Settings, settings
from studio_planner.core.errors import BackendError, ExportError, PlanNotFoundError, ReportGenerationError
from studio_planner.core.logging import get_logger
from studio_planner.export.exporter import DocumentExporter
from studio_planner.llm.generator import ReportGenerator
from studio_planner.store.base import PlanStore
from studio_planner.store.factory import build_plan_store

log = get_logger("main")

ERROR_STATUS = {
    PlanNotFoundError: 404,
    BackendError: 502,
    ReportGenerationError: 502,
    ExportError: 500,
}


def create_app(
    cfg: Settings = settings,
    *,
    store: PlanStore | None = None,
    generator: ReportGenerator | None = None,
    exporter: DocumentExporter | None = None,
) -> FastAPI:
    app = FastAPI(title="Studio Planner API", version="0.1.0")
    app.include_router(router, prefix="/v1")

    # backend chosen once, here
    app.state.store = store or build_plan_store(cfg)
    app.state.generator = generator or ReportGenerator()
    app.state.exporter = exporter or DocumentExporter(cfg.EXPORT_DIR, brand=cfg.EXPORT_BRAND)

    for exc_type, status in ERROR_STATUS.items():
        async def handler(request: Request, exc: Exception, status: int = status):
            return JSONResponse(status_code=status, content={"detail": str(exc)})

        app.add_exception_handler(exc_type, handler)

    @app.on_event("startup")
    async def on_startup():
        log.info(f"Plan store backend: {app.state.store.backend_name}")
        await app.state.store.init()

    @app.on_event("shutdown")
    async def on_shutdown():
        await app.state.store.aclose()

    return app


app = create_app()
