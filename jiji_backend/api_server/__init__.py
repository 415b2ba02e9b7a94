"""
API server package: the HTTP interface.

Exposes the ask endpoint and health checks. Validates requests and delegates
connectivity checks to the database pool.
"""
