from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from scorekeeper.errors import StorageError


@contextmanager
def atomic(session):
    """Run the enclosed statements as one transaction on ``session``.

    Commits when the block finishes, rolls back on any exception. Database
    errors are re-raised as ``StorageError``; ledger errors pass through
    unchanged after the rollback.
    """
    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise StorageError('Storage operation failed') from exc
    except Exception:
        session.rollback()
        raise
