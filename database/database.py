import logging

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from tenacity import retry, stop_after_attempt, wait_fixed

from core.config_loader import load_config

logger = logging.getLogger(__name__)

_db_config = load_config().database

engine = create_engine(
    _db_config.url,
    pool_size=_db_config.pool_size,
    max_overflow=_db_config.max_overflow,
    pool_pre_ping=True,
    connect_args={"connect_timeout": _db_config.connect_timeout_seconds},
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_database() -> bool:
    """Single round-trip reachability probe for the health endpoint."""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning(f"Database check failed: {e}")
        return False


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2), reraise=True)
def wait_for_database() -> None:
    """Block until the database accepts connections (5 attempts, 2s apart)."""
    logger.info("Waiting for database...")
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    logger.info("Database is reachable.")
