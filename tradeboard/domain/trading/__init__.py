"""
Trading bounded context: domain layer.

This module contains all domain logic for the trading context:
- Trade records and aggregation granularities
- Period bucketing and per-period statistics
- Dashboard summary metrics
"""
