import logging
from functools import wraps

from sqlalchemy.exc import SQLAlchemyError

from studentms.core.exceptions import StoreOperationError

logger = logging.getLogger(__name__)


def store_operation(operation: str):
    """
    Turn a store write into a plain success flag.

    Any SQLAlchemy error (constraint violation, locked database, ...) is
    rolled back, logged and reported as False so callers never see it.
    The session is emptied after every write: bulk UPDATE/DELETE and the
    database cascades bypass the identity map, so nothing loaded before the
    write can be trusted afterwards.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(db, *args, **kwargs):
            try:
                ok = bool(func(db, *args, **kwargs))
            except SQLAlchemyError as e:
                db.rollback()
                err = StoreOperationError(operation, str(getattr(e, "orig", None) or e))
                logger.error(f"❌ {err.message} [{err.code}]")
                return False
            finally:
                db.expunge_all()
            logger.debug(f"{operation}: {'ok' if ok else 'no rows changed'}")
            return ok
        return wrapper
    return decorator
