"""
Application layer for the library bounded context.

Services coordinate domain entities and ports to fulfill
the CRUD operations. No framework or infrastructure imports allowed.
"""
