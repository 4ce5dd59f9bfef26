from typing import List, Tuple

from sqlalchemy import func

from scorekeeper.models import STARTING_SCORE, QuestionLog, Team


def verify_scores(session) -> List[Tuple[str, int, int]]:
    """Compare each stored score with the starting score plus its logged points.

    Returns ``(name, stored, expected)`` for every team that has drifted;
    an empty list means all scores are consistent.
    """
    totals = dict(
        session.query(QuestionLog.team, func.coalesce(func.sum(QuestionLog.points), 0))
        .group_by(QuestionLog.team)
        .all()
    )
    drift = []
    for team in session.query(Team).order_by(Team.name.asc()).all():
        expected = STARTING_SCORE + int(totals.get(team.name, 0))
        if team.score != expected:
            drift.append((team.name, team.score, expected))
    return drift
