"""FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from custody_ledger.core.config import settings
from custody_ledger.core.errors import LedgerError
from custody_ledger.db.session import engine

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

# ============================================================================
# Sentry Integration (optional, for production error tracking)
# ============================================================================

if settings.SENTRY_DSN and settings.ENV != "dev":
    import sentry_sdk
    from sentry_sdk.integrations.fastapi import FastApiIntegration
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENV,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            SqlalchemyIntegration(),
        ],
        traces_sample_rate=0.1,
        send_default_pii=False,  # Don't send PII to Sentry
    )
    logger.info("Sentry initialized for error tracking")


# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="Custody Ledger API",
    description="Prison custody and identity ledger",
    version=settings.VERSION,
    docs_url="/docs" if settings.ENV == "dev" else None,
    redoc_url="/redoc" if settings.ENV == "dev" else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)


@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError):
    """Map service errors to their HTTP status."""
    if exc.status_code >= 500:
        logger.warning("Request failed: %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


# ============================================================================
# Routers
# ============================================================================

from custody_ledger.routers import (  # noqa: E402
    attendance,
    biometrics,
    court_appearances,
    courts,
    custody_records,
    inmates,
    movements,
    officers,
    prisons,
    storage,
    visits,
)

# Facilities and reference data
app.include_router(prisons.router, prefix="/prisons", tags=["prisons"])
app.include_router(courts.router, tags=["courts"])  # Mixed paths: /courts and /offenses
app.include_router(officers.router, prefix="/officers", tags=["officers"])

# Inmates and custody
app.include_router(inmates.router, prefix="/inmates", tags=["inmates"])
app.include_router(movements.router, prefix="/movements", tags=["movements"])
app.include_router(
    court_appearances.router, prefix="/court-appearances", tags=["court-appearances"]
)
app.include_router(custody_records.router, tags=["custody-records"])
app.include_router(visits.router, prefix="/visits", tags=["visits"])

# Biometrics (photos and fingerprints of inmates and officers)
app.include_router(biometrics.router, tags=["biometrics"])
app.include_router(storage.router, prefix="/storage", tags=["storage"])

# Officer attendance
app.include_router(attendance.router, prefix="/attendance", tags=["attendance"])


@app.get("/health")
def health():
    """
    Health check endpoint.

    Verifies database connectivity and returns environment info.
    """
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    return {"status": "ok", "env": settings.ENV, "version": settings.VERSION}
