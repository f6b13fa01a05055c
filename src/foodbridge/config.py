"""Configuration loader for FoodBridge"""

import os
from pathlib import Path

from dotenv import load_dotenv

project_dir = Path(__file__).parent.parent.parent
env_path = project_dir / ".env"

# Load .env file if it exists. For local development only.
if env_path.exists():
    load_dotenv(env_path)

# Configuration dictionary - set once at initialization
config = {
    "redis_url": os.getenv("REDIS_URL", "redis://localhost:6379/0"),
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
    "app_port": int(os.getenv("APP_PORT", "8000")),
    # Sliding expiry for in-progress sign-up wizards
    "wizard_ttl_seconds": int(os.getenv("WIZARD_TTL_SECONDS", "1800")),
    "environment": os.getenv("ENVIRONMENT", "development"),
}
