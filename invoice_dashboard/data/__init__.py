"""
Data access layer.

Design rules:
- Views call ONLY functions in service.py.
- Every remote call is wrapped: failures are logged and re-raised as DataFetchError.
- No env var reads here (config-only).
"""
