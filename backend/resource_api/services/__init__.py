"""Services Layer — persistence and per-operation handlers (imperative shell).

Invariants:
    - Handlers call core validation first, repository second
    - Handlers return tagged outcomes; only unexpected failures raise
"""
