"""
Application layer for the taskboard bounded context.

Services coordinate domain entities and ports to fulfill
business operations. No framework or infrastructure imports allowed.
"""
