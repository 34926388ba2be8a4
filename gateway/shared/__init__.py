"""
Shared module package.

Contains cross-cutting concerns:
- Error rendering and FastAPI error handlers
- Worker helper for blocking units of work
- Logging configuration
"""
