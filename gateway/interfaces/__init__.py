"""
Interfaces layer package.

Contains FastAPI routers, request extractors and Pydantic schemas.
No business logic belongs here.
Routes call use cases and return responses.
"""
