"""
Infrastructure adapters for the trading bounded context.

Each adapter implements a domain port (ABC) or guards a system
boundary: the seeded mock trade generator, the HTTP trades client
and the raw record normalizer.
"""
