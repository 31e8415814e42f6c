"""
Ranking Module.

Per-cuisine rating index: ordered sets of (rating, food) entries kept in
step with rating updates, plus leaderboard export.
"""
