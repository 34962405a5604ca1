"""
Shared module package.

Cross-cutting concerns used by the mock backend and the dashboard:
logging setup, domain-error to HTTP mapping, security headers and
per-endpoint rate limits.
"""
