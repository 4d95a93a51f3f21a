"""
Drop and recreate every table.

Usage:
  python -m qr_reorder.scripts.reset_db
"""
import logging

from qr_reorder.core.config import settings
from qr_reorder.core.db import Base, engine
from qr_reorder.core.logging_config import configure_logging
import qr_reorder.models  # noqa: F401

logger = logging.getLogger(__name__)


def main():
    configure_logging(settings.LOG_LEVEL)
    logger.info("Dropping and recreating all tables...")
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info("Database schema refreshed successfully.")


if __name__ == "__main__":
    main()
