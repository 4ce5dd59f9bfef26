"""Score ledger services: team registry, question log, resets and exports.

Every function takes the SQLAlchemy session to work on as its first
argument. Writes that touch both a log entry and a team score run inside a
single ``atomic`` block so the stored score always equals the starting score
plus the sum of that team's logged points.
"""
