"""
Task API — CRUD service for tasks and the users who own them.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - taskboard: Tasks, users, paginated listings.

Layers:
    - domain: Entities, pagination page, ports (ABCs), errors.
    - application: Services, DTOs, orchestration.
    - infrastructure: SQLAlchemy engine, schema and repositories.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (status catalog, response envelopes,
      errors, rate limiting, logging).
"""
