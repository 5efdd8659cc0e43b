import contextlib
import logging

from database.database import SessionLocal
from database.repository import TrustRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def trust_uow():
    """Transaction scope for one request.

    Yields a TrustRepository whose repositories share a fresh Session.
    Row locks taken with FOR UPDATE are held until the commit or rollback
    at the end of the block.

    Usage:
        with trust_uow() as repo:
            result = gate.verify(repo, phone, code)
        result.raise_for_outcome()
    """
    session = SessionLocal()
    try:
        yield TrustRepository(session)
        session.commit()
    except Exception as e:
        logger.debug(f"Rolling back trust unit of work: {e.__class__.__name__}")
        session.rollback()
        raise
    finally:
        session.close()
