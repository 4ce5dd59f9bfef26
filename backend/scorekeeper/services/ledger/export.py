import csv
import io
from typing import Iterable

from scorekeeper.models import QuestionLog

CSV_HEADER = ['Log ID', 'Round', 'Team', 'Points', 'Timestamp']


def render_logs_csv(entries: Iterable[QuestionLog]) -> str:
    """Render log entries as the master score sheet.

    Text columns (round, team, timestamp) are always quoted; the numeric id
    and points columns never are.
    """
    out = io.StringIO()
    out.write(','.join(CSV_HEADER) + '\n')
    w = csv.writer(out, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for entry in entries:
        w.writerow([
            entry.id,
            entry.display_round,
            entry.team,
            entry.points,
            entry.time_iso or '',
        ])
    return out.getvalue()
