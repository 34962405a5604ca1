"""
Infrastructure layer package.

Adapters implementing domain ports against concrete technology.
"""
