"""
Library bounded context: domain layer.

Customers, categories and books, the errors raised when their
invariants are broken, and the ports the services depend on.
"""
