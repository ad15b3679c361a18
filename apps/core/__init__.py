"""
Core app for the Newsroom CMS.

Provides staff roles, the capability oracle, error handling, audit logging,
request tracing and health/metrics endpoints.
"""
