"""
Database initialization.

Creates all tables directly from the SQLModel metadata.  Production
deployments should prefer ``alembic upgrade head``.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from app.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None) -> None:
    """Create every table that does not exist yet."""

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    target = engine or default_engine
    logger.info("Creating database tables on %s", target.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(target)
    logger.info("Database tables ready")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
