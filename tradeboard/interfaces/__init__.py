"""
Interfaces layer package.

FastAPI routers and Pydantic schemas of the mock trades backend.
Routes validate query parameters, call use cases and serialize
the results with the camelCase field names browsers expect.
"""
