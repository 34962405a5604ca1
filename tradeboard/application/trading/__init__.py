"""
Application layer for the trading bounded context.

Use cases coordinate domain services and ports to fulfill
trade queries and dashboard refreshes. No framework imports allowed.
"""
