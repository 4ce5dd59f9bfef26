from .question_log import delete_all_logs
from .teams import delete_all_teams, reset_all_scores
from .transaction import atomic


def reset_scores(session) -> None:
    """Wipe the question history and put every team back on the starting score."""
    with atomic(session):
        delete_all_logs(session)
        reset_all_scores(session)


def reset_tournament(session) -> None:
    """Remove every log entry and every team."""
    with atomic(session):
        # Logs first; they reference teams
        delete_all_logs(session)
        delete_all_teams(session)
