"""
Core utilities shared across the choreboard API.

This package hosts configuration helpers (env vars, feature flags) and the
cross-cutting pieces used by every resource: logging setup and the alert
headers attached to mutating responses.
"""
