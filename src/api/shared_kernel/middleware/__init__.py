"""Shared middleware for cross-cutting concerns.

Holds the tenant context value object and the Host header resolution
used by every request before any filesystem access happens.
"""
