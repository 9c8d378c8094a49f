# Routes package init
"""
Leaderboard Backend — API Routes Package
==========================================

Route Inventory:
    - scores.py:  POST /api/scores   (submit a score)
                  GET  /api/scores   (top ten scores)
    - health.py:  GET  /health       (service health check)

Routes stay thin: read the request, call ScoreService, return its result.
"""
