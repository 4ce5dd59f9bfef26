from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from scorekeeper.api.scoreboard import scoreboard
    flask_app.register_blueprint(scoreboard)

    from scorekeeper.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    @click.command('init-db')
    def init_db_command():
        """Creates the teams and question_logs tables if missing."""
        from scorekeeper import models  # noqa: F401
        with flask_app.app_context():
            db.create_all()
        click.echo('Database tables created.')

    @click.command('reset-tournament')
    @click.confirmation_option(prompt='This deletes every team and log entry. Continue?')
    def reset_tournament_command():
        """Deletes all teams and question logs."""
        from scorekeeper.services.ledger.resets import reset_tournament
        with flask_app.app_context():
            reset_tournament(db.session)
        click.echo('Tournament has been reset.')

    @click.command('verify-scores')
    def verify_scores_command():
        """Checks every team score against its logged point deltas."""
        from scorekeeper.services.ledger.audit import verify_scores
        with flask_app.app_context():
            drift = verify_scores(db.session)
        if not drift:
            click.echo('All scores match their logs.')
            return
        for name, stored, expected in drift:
            click.echo(f'{name}: stored={stored} expected={expected}')
        raise SystemExit(1)

    flask_app.cli.add_command(init_db_command)
    flask_app.cli.add_command(reset_tournament_command)
    flask_app.cli.add_command(verify_scores_command)

    return flask_app
