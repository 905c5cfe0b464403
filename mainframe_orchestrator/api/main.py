"""
FastAPI application - Main entry point

Run with:
  uvicorn mainframe_orchestrator.api.main:app --host 0.0.0.0 --port 50001
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from mainframe_orchestrator import __version__
from mainframe_orchestrator.api.dependencies import get_config
from mainframe_orchestrator.api.endpoints.claims import router as claims_router
from mainframe_orchestrator.api.endpoints.contacts import router as contacts_router
from mainframe_orchestrator.api.endpoints.orders import router as orders_router
from mainframe_orchestrator.error_handler import ErrorHandler, UpstreamUnavailable

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

config = get_config()
error_handler = ErrorHandler()

# Initialize FastAPI app
app = FastAPI(
    title=config.server.name,
    description="Orchestration APIs combining IMS, CICS and Db2 REST services",
    version=__version__,
)

app.include_router(contacts_router)
app.include_router(orders_router)
app.include_router(claims_router)

_BANNER_ART = [
    "=  *****  ******   ***   ****  **    **    ****** **  **    ******  =",
    "=  ** *** **      ** **  ** **  **  **     **  ** *** **       **   =",
    "=  *****  ****** ******* **  **  ****      **  ** ******      **    =",
    "=  ** **  **     **   ** ** **    **       **  ** ** ***     **     =",
    "=  **  ** ****** **   ** ****     **       ****** **  **    ******  =",
]


def render_banner(port: int) -> str:
    rule = "=" * 69
    title = f"Python sample application running on port {port}."
    lines = [rule, "=" + title.center(67) + "=", rule, *_BANNER_ART, rule]
    return "\n".join(lines) + "\n"


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================
@app.exception_handler(UpstreamUnavailable)
async def upstream_unavailable_handler(request: Request, exc: UpstreamUnavailable):
    return JSONResponse(status_code=exc.status_code, content=error_handler.handle_upstream(exc))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    return JSONResponse(
        status_code=500,
        content=error_handler.handle_exception(exc, context={"path": request.url.path}),
    )


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/", response_class=PlainTextResponse, tags=["Health"])
async def display_ready():
    """Ready banner."""
    return render_banner(config.server.port)


@app.get("/health", tags=["Health"])
async def health_check():
    return {
        "service": config.server.name,
        "status": "healthy",
        "version": __version__,
        "integrations_mode": config.integrations_mode,
        "timestamp": datetime.now().isoformat(),
    }


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    """Log what this process will talk to"""
    logger.info("Starting %s on port %s (integrations_mode=%s)", config.server.name, config.server.port, config.integrations_mode)
    if config.integrations_mode == "real":
        upstreams = config.upstreams
        logger.info(
            "Upstreams: phonebook=%s postal_codes=%s catalog=%s order_log=%s (enabled=%s)",
            upstreams.phonebook.base_url,
            upstreams.postal_codes.base_url,
            upstreams.catalog.base_url,
            upstreams.order_log.base_url,
            upstreams.order_log.enabled,
        )


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down %s...", config.server.name)
