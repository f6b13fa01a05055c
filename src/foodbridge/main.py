#!/usr/bin/env python3
"""FoodBridge - Volunteer sign-up and admin dashboard API"""

import uvicorn
from fastapi import FastAPI

from foodbridge import __version__
from foodbridge.auth.session import AuthSession
from foodbridge.config import config
from foodbridge.logging_config import get_logger, setup_logging
from foodbridge.models.database import get_redis
from foodbridge.routers.admin import router as admin_router
from foodbridge.routers.health import health
from foodbridge.routers.signup import router as signup_router
from foodbridge.services.admin_login_log import AdminLoginLog
from foodbridge.services.record_store import RecordStore

# Configure logging (INFO -> stdout, WARNING/ERROR -> stderr)
setup_logging()
logger = get_logger(__name__)


app = FastAPI(
    title="FoodBridge",
    description="Community Food Network - volunteer sign-up and admin dashboard API",
    version=__version__,
)

# One dashboard session for the whole app, logged out until /admin/login
app.state.auth_session = AuthSession(
    login_log=AdminLoginLog(RecordStore(get_redis()))
)

app.include_router(health)
app.include_router(signup_router)
app.include_router(admin_router)


def run():
    port = config["app_port"]
    logger.info(f"Starting FoodBridge on 0.0.0.0:{port}")
    logger.info("Health check available at /health")

    try:
        uvicorn.run(
            app, host="0.0.0.0", port=port, log_level=config["log_level"].lower()
        )
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        raise


if __name__ == "__main__":
    run()
