"""
TradeBoard: trade analytics dashboard and mock trades backend.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - trading: Trade records, period aggregation, dashboard summaries.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (mock generator, HTTP client, normalizer).
    - interfaces: FastAPI routers, Pydantic schemas.
    - dashboard: Streamlit view-model, filters and chart builders.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
