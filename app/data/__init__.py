"""
Data access layer.

Design rules:
- Views call ONLY functions in data.service.
- data.vertica is the accessor; its errors propagate. Only data.service falls back to mock data.
- No env var reads here (config-only).
"""
