from datetime import timezone

from scorekeeper import db

STARTING_SCORE = 1200


class Team(db.Model):
    __tablename__ = 'teams'
    name = db.Column(db.String(128), primary_key=True)
    score = db.Column(db.Integer, nullable=False, default=STARTING_SCORE)

    def to_dict(self):
        return {
            'name': self.name,
            'score': self.score,
        }


class QuestionLog(db.Model):
    __tablename__ = 'question_logs'
    id = db.Column(db.Integer, primary_key=True)
    question = db.Column(db.String(64), nullable=True)
    team = db.Column(
        db.String(128),
        db.ForeignKey('teams.name', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    points = db.Column(db.Integer, nullable=False)
    round_label = db.Column(db.String(64), nullable=True)
    time = db.Column(db.DateTime(timezone=True), server_default=db.func.now())

    @property
    def display_round(self):
        """Round column for exports: explicit label, else derived from the question."""
        if self.round_label:
            return self.round_label
        return f"Q{self.question if self.question is not None else ''}"

    @property
    def time_iso(self):
        """UTC ISO-8601 timestamp with millisecond precision and a Z suffix."""
        if self.time is None:
            return None
        value = self.time
        # SQLite hands back naive values; CURRENT_TIMESTAMP is UTC there
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        return value.isoformat(timespec='milliseconds').replace('+00:00', 'Z')

    def to_dict(self):
        return {
            'id': self.id,
            'question': self.question,
            'team': self.team,
            'points': self.points,
            'round_label': self.round_label,
            'time': self.time_iso,
        }
