from flask import current_app
from flask_socketio import emit
from scorekeeper import socketio, db
from scorekeeper.services.ledger.teams import list_scores


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_ping(data):
    emit('pong', data or {})


def broadcast_scores() -> None:
    """Push the current leaderboard to every client on /ws.

    Runs after the mutation has committed, so a failure here is logged and
    never fails the request.
    """
    try:
        scores = [{'name': name, 'score': score} for name, score in list_scores(db.session)]
        socketio.emit('scores_update', {'scores': scores}, namespace='/ws')
    except Exception as exc:
        db.session.rollback()
        current_app.logger.warning(f"[broadcast] scores_update not sent: {exc}")


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'."""
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')
