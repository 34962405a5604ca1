"""
Application layer package.

Use cases orchestrating the domain for the API and the dashboard.
"""
