"""
Development server launcher.

Loads .env file and runs FastAPI with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.config import settings
from app.core.logging import configure_logging

HOST = "0.0.0.0"
PORT = 3001

logger = logging.getLogger("powerlog.dev")

if __name__ == "__main__":
    configure_logging()
    logger.info("Starting %s %s on http://localhost:%d (docs at /docs)", settings.PROJECT_NAME, settings.VERSION,
                PORT)
    uvicorn.run("app.main:app", host=HOST, port=PORT, reload=True, log_level=settings.LOG_LEVEL.lower())
