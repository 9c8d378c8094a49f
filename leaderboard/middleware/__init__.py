# Middleware package init
"""
Leaderboard Backend — Middleware Package
==========================================

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access log line carries the ID; the
    logging middleware sees the final status code on the way back out.
"""
