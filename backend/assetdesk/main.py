import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from assetdesk import __version__
from assetdesk.api import (
    assets,
    audit,
    categories,
    depreciation,
    employees,
    finance,
    maintenance,
    procurement,
    roles,
    room_categories,
    rooms,
    tasks,
    tenants,
)
from assetdesk.db.database import init_db
from assetdesk.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_db()
    logger.info("AssetDesk %s started", __version__)
    yield


app = FastAPI(
    title="AssetDesk API",
    description="Multi-tenant asset tracking: inventory, rooms, maintenance, depreciation and procurement",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Request failed."})


app.include_router(assets.router, prefix="/api/assets", tags=["assets"])
app.include_router(categories.router, prefix="/api/categories", tags=["categories"])
app.include_router(rooms.router, prefix="/api/rooms", tags=["rooms"])
app.include_router(room_categories.router, prefix="/api/room-categories", tags=["rooms"])
app.include_router(maintenance.router, prefix="/api/maintenance", tags=["maintenance"])
app.include_router(procurement.router, prefix="/api/procurement", tags=["procurement"])
app.include_router(depreciation.router, prefix="/api/depreciation", tags=["depreciation"])
app.include_router(finance.router, prefix="/api/finance", tags=["finance"])
app.include_router(employees.router, prefix="/api/employees", tags=["personnel"])
app.include_router(roles.router, prefix="/api/roles", tags=["personnel"])
app.include_router(tenants.router, prefix="/api/tenants", tags=["tenants"])
app.include_router(tasks.router, prefix="/api/tasks", tags=["tasks"])
app.include_router(audit.router, prefix="/api/audit-logs", tags=["audit"])


@app.get("/health")
def health_check():
    return {"status": "ok", "version": __version__}
