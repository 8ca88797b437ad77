"""
Infrastructure adapters for the library bounded context.

Each adapter implements a domain port (ABC).
"""
