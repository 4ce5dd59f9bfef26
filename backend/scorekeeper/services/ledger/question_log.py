from typing import List

from scorekeeper.errors import NotFoundError, ValidationError
from scorekeeper.models import QuestionLog
from .teams import adjust_score
from .transaction import atomic


def _as_int(value, field: str) -> int:
    # Presence is checked against None so that 0 stays a valid value
    if value is None:
        raise ValidationError(f'{field} required')
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be an integer')
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f'{field} must be an integer')
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f'{field} must be an integer')


def _locked_entry(session, log_id: int) -> QuestionLog:
    entry = (
        session.query(QuestionLog)
        .filter(QuestionLog.id == log_id)
        .with_for_update()
        .first()
    )
    if entry is None:
        raise NotFoundError('Log not found')
    return entry


def log_question(session, question, team, points, round_label=None) -> QuestionLog:
    """Record a scoring event and move the team's score by ``points``."""
    if not isinstance(team, str) or not team:
        raise ValidationError('Invalid payload: team required')
    points = _as_int(points, 'points')
    entry = QuestionLog(
        question=str(question) if question is not None else None,
        team=team,
        points=points,
        round_label=round_label or None,
    )
    with atomic(session):
        adjust_score(session, team, points)
        session.add(entry)
        session.flush()
    return entry


def edit_log_points(session, log_id, new_points) -> int:
    """Change a log entry's points and shift its team by the difference.

    Returns the applied difference.
    """
    log_id = _as_int(log_id, 'id')
    new_points = _as_int(new_points, 'newPoints')
    with atomic(session):
        entry = _locked_entry(session, log_id)
        diff = new_points - entry.points
        entry.points = new_points
        adjust_score(session, entry.team, diff)
    return diff


def delete_log(session, log_id) -> dict:
    """Remove a log entry and take its points back from the team.

    Returns a snapshot of the removed entry.
    """
    log_id = _as_int(log_id, 'id')
    with atomic(session):
        entry = _locked_entry(session, log_id)
        removed = entry.to_dict()
        adjust_score(session, entry.team, -entry.points)
        session.delete(entry)
    return removed


def list_logs(session) -> List[QuestionLog]:
    return session.query(QuestionLog).order_by(QuestionLog.id.desc()).all()


def export_logs_ascending(session) -> List[QuestionLog]:
    return session.query(QuestionLog).order_by(QuestionLog.id.asc()).all()


def delete_all_logs(session) -> None:
    session.query(QuestionLog).delete(synchronize_session=False)
