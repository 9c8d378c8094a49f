# Services package init
"""
Leaderboard Backend — Services Layer
======================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
Why:   Routes handle HTTP; services handle store access and error translation.

Service Inventory:
    - ScoreService: submit a score, read the top ten

Services can be unit-tested with a mocked AsyncSession and no HTTP stack.
"""
