"""
Library Management API.

Application package root. A small hexagonal (ports & adapters)
service exposing customers, categories and books over HTTP/JSON.

Layers:
    - domain: Entities, ports (ABCs), errors, validation rules.
    - application: Services and DTOs.
    - infrastructure: Adapters (SQL repositories, bcrypt, JWT).
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
