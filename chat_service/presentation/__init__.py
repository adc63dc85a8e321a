"""
Presentation Layer - HTTP endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: the bearer-token access gate
"""
