"""
Utility modules for FoodRatings.

Cross-cutting concerns:
- Storage: catalogue and call-script loading, result and leaderboard files
"""
