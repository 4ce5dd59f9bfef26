from flask import Blueprint, Response, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from scorekeeper import db
from scorekeeper.errors import LedgerError, StorageError, ValidationError
from scorekeeper.services.ledger import question_log, resets, teams
from scorekeeper.services.ledger.export import render_logs_csv
from scorekeeper.socketio_events import broadcast_scores


scoreboard = Blueprint('scoreboard', __name__)


def _payload():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Invalid payload')
    return data


@scoreboard.errorhandler(LedgerError)
def handle_ledger_error(exc):
    if isinstance(exc, StorageError):
        current_app.logger.exception(f"[storage] {request.method} {request.path} failed")
        return 'Internal server error', 500
    return exc.message, exc.status_code


@scoreboard.errorhandler(SQLAlchemyError)
def handle_db_error(exc):
    db.session.rollback()
    current_app.logger.exception(f"[storage] {request.method} {request.path} failed")
    return 'Internal server error', 500


@scoreboard.route('/health', methods=['GET'])
def health():
    return 'OK'


@scoreboard.route('/addTeam', methods=['POST'])
def add_team():
    data = _payload()
    name = data.get('name')
    created = teams.add_team(db.session, name)
    current_app.logger.info(f"[add_team] team={name!r} created={created}")
    broadcast_scores()
    return 'Team added'


@scoreboard.route('/teams', methods=['GET'])
def get_teams():
    return jsonify([{'name': name} for name in teams.list_teams(db.session)])


@scoreboard.route('/logQuestion', methods=['POST'])
def log_question():
    data = _payload()
    entry = question_log.log_question(
        db.session,
        data.get('question'),
        data.get('team'),
        data.get('points'),
        data.get('roundLabel'),
    )
    current_app.logger.info(f"[log_question] id={entry.id} team={entry.team!r} points={entry.points}")
    broadcast_scores()
    return 'Logged'


@scoreboard.route('/updateLog', methods=['POST'])
def update_log():
    data = _payload()
    diff = question_log.edit_log_points(db.session, data.get('id'), data.get('newPoints'))
    current_app.logger.info(f"[edit_log] id={data.get('id')} diff={diff}")
    broadcast_scores()
    return 'Updated'


@scoreboard.route('/deleteLog', methods=['POST'])
def delete_log():
    data = _payload()
    removed = question_log.delete_log(db.session, data.get('id'))
    current_app.logger.info(
        f"[delete_log] id={removed['id']} team={removed['team']!r} points={removed['points']}"
    )
    broadcast_scores()
    return 'Deleted'


@scoreboard.route('/scores', methods=['GET'])
def get_scores():
    return jsonify([{'name': name, 'score': score} for name, score in teams.list_scores(db.session)])


@scoreboard.route('/questionLogs', methods=['GET'])
def get_question_logs():
    return jsonify([entry.to_dict() for entry in question_log.list_logs(db.session)])


@scoreboard.route('/downloadSheet', methods=['GET'])
def download_sheet():
    body = render_logs_csv(question_log.export_logs_ascending(db.session))
    filename = current_app.config.get('EXPORT_FILENAME', 'Strategiq_Master_Sheet.csv')
    return Response(
        body,
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename="{filename}"'},
    )


@scoreboard.route('/resetScores', methods=['POST'])
def reset_scores():
    resets.reset_scores(db.session)
    current_app.logger.info("[reset_scores] scores reset, logs cleared")
    broadcast_scores()
    return 'Scores reset'


@scoreboard.route('/resetTournament', methods=['POST'])
def reset_tournament():
    resets.reset_tournament(db.session)
    current_app.logger.info("[reset_tournament] teams and logs cleared")
    broadcast_scores()
    return 'Tournament reset'
