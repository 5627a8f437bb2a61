# staffgap/main.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
import sys

from staffgap.core.config import settings
from staffgap.core.portal import init_portal
from staffgap.core.seeding_logic import build_demo_seed

# Routers
from staffgap.api.endpoints import (
    auth as auth_router,
    users as users_router,
    account as account_router,
    directory as directory_router,
    submissions as submissions_router,
    analytics as analytics_router,
    reports as reports_router,
    policy as policy_router,
    announcements as announcements_router,
    notifications as notifications_router,
    logs as logs_router,
    support as support_router,
    dashboard as dashboard_router,
    common as common_router,
)

# ------------------------------------------------------------
# LOGURU CONFIGURATION
# ------------------------------------------------------------
logger.remove()
logger.add(
    sys.stdout,
    level=settings.LOG_LEVEL,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
           "<level>{level}</level> | "
           "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
           "<level>{message}</level>",
    colorize=True,
    backtrace=True,
    diagnose=settings.ENV != "prod",
)

# ------------------------------------------------------------
# FASTAPI APP INIT
# ------------------------------------------------------------
app = FastAPI(
    title="Staff Gap Analysis Portal",
    version="1.0.0",
    description="Academic staffing submissions, NUC gap analysis and review workflow.",
)

# ------------------------------------------------------------
# CORS CONFIGURATION
# ------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "*",
    ],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "*"],
)

# ------------------------------------------------------------
# REGISTER ROUTERS
# ------------------------------------------------------------
app.include_router(auth_router.router)
app.include_router(users_router.router)
app.include_router(account_router.router)
app.include_router(directory_router.router)
app.include_router(submissions_router.router)
app.include_router(analytics_router.router)
app.include_router(reports_router.router)
app.include_router(policy_router.router)
app.include_router(announcements_router.router)
app.include_router(notifications_router.router)
app.include_router(logs_router.router)
app.include_router(support_router.router)
app.include_router(dashboard_router.router)
app.include_router(common_router.router)

# ------------------------------------------------------------
# APPLICATION STARTUP EVENTS
# ------------------------------------------------------------
@app.on_event("startup")
async def on_startup():
    logger.info("Starting Staff Gap Analysis Portal...")

    if settings.SEED_DEMO_DATA:
        seed = build_demo_seed(default_academic_year=settings.DEFAULT_ACADEMIC_YEAR)
        app.state.portal = init_portal(seed)
        logger.success(f"Demo data seeded: {app.state.portal.counts()}")
    else:
        app.state.portal = init_portal()
        logger.warning("SEED_DEMO_DATA is off: portal starts empty.")

    logger.success("Backend startup completed successfully.\n")


# ------------------------------------------------------------
# ROOT HEALTH CHECK
# ------------------------------------------------------------
@app.get("/", tags=["System"])
async def root():
    return {
        "status": "ok",
        "service": "Staff Gap Analysis Portal",
        "version": app.version,
        "message": "Backend running successfully",
    }
