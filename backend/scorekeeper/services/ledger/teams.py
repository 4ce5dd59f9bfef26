from typing import List, Tuple

from sqlalchemy.exc import IntegrityError

from scorekeeper.errors import NotFoundError, StorageError, ValidationError
from scorekeeper.models import STARTING_SCORE, Team
from .transaction import atomic


def add_team(session, name) -> bool:
    """Register a team at the starting score.

    Re-adding an existing name is a no-op, also when a concurrent request
    inserts the same name between the lookup and the insert. Returns True
    only when a row was inserted.
    """
    if not isinstance(name, str) or not name.strip():
        raise ValidationError('Team name required')
    try:
        with atomic(session):
            if session.get(Team, name) is not None:
                return False
            session.add(Team(name=name, score=STARTING_SCORE))
            session.flush()
    except StorageError as exc:
        if isinstance(exc.__cause__, IntegrityError):
            return False
        raise
    return True


def list_teams(session) -> List[str]:
    rows = session.query(Team.name).order_by(Team.name.asc()).all()
    return [r.name for r in rows]


def list_scores(session) -> List[Tuple[str, int]]:
    rows = session.query(Team.name, Team.score).order_by(Team.score.desc(), Team.name.asc()).all()
    return [(r.name, r.score) for r in rows]


def adjust_score(session, name: str, delta: int) -> None:
    """Add ``delta`` to a team's score inside the caller's transaction."""
    updated = (
        session.query(Team)
        .filter(Team.name == name)
        .update({Team.score: Team.score + delta}, synchronize_session=False)
    )
    if not updated:
        raise NotFoundError('Team not found')


def reset_all_scores(session) -> None:
    session.query(Team).update({Team.score: STARTING_SCORE}, synchronize_session=False)


def delete_all_teams(session) -> None:
    session.query(Team).delete(synchronize_session=False)
