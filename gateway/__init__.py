"""
search-gateway: HTTP front end for the indexing services.

Application package root. The gateway accepts requests, hands the work
to the task scheduler, the update-file store and the document readers,
and reduces every failure to a single stable error code.

Layers:
    - domain: Error taxonomy, code mapping, collaborator ports.
    - application: Use cases (document additions, index and task lookups).
    - infrastructure: In-process adapters implementing domain ports.
    - interfaces: FastAPI routers, request extractors, Pydantic schemas.
    - shared: Cross-cutting concerns (error rendering, logging, workers).
"""
