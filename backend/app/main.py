from __future__ import annotations
import asyncio
import logging
from contextlib import asynccontextmanager

from app.config import get_settings

settings = get_settings()

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.database import async_session, init_db
from app.exceptions import LedgerError
from app.services.asset_ledger import AssetLedgerService
from app.services.notifier import Notifier

worker_tasks: list[asyncio.Task] = []


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await init_db()
    ledger = AssetLedgerService(async_session, notifier=Notifier(settings.webhook_urls))
    await ledger.bootstrap(settings.privileged_address)
    app.state.ledger = ledger

    from app.workers.notification_worker import run_notification_worker

    worker_tasks.append(asyncio.create_task(run_notification_worker(ledger.notifier)))

    yield

    # Shutdown
    for task in worker_tasks:
        task.cancel()
    await asyncio.gather(*worker_tasks, return_exceptions=True)
    worker_tasks.clear()


app = FastAPI(
    title="Asset Ledger",
    description="Token registry, transfer ledger, holder counts and aggregate snapshots",
    version="1.0.0",
    lifespan=lifespan,
)

_origins = [settings.frontend_url.rstrip("/"), "http://localhost:3000", "http://localhost:3001"]
if settings.extra_cors_origins:
    _origins.extend([o.strip().rstrip("/") for o in settings.extra_cors_origins.split(",") if o.strip()])
# Deduplicate
_origins = list(dict.fromkeys(_origins))

logger = logging.getLogger(__name__)
logger.info("CORS allowed origins: %s", _origins)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.__class__.__name__},
    )


# Register route modules
from app.api import assets, transfers, snapshots, access

app.include_router(assets.router)
app.include_router(transfers.router)
app.include_router(snapshots.router)
app.include_router(access.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
