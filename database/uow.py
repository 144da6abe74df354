import contextlib
import logging

from database.database import SessionLocal
from database.repository import MarketplaceRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def marketplace_uow():
    """Request-scoped transaction over the marketplace tables.

    Yields a MarketplaceRepository bound to a fresh Session. Match upserts
    made inside the block are committed together when it exits cleanly;
    any exception rolls them back, is logged with its type, and re-raised.
    The session is always closed.
    """
    session = SessionLocal()
    repo = MarketplaceRepository(session)
    try:
        yield repo
        session.commit()
    except Exception as e:
        session.rollback()
        logger.warning(f"Marketplace transaction rolled back after {type(e).__name__}: {e}")
        raise
    finally:
        session.close()
