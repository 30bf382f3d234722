"""
token_gateway.api

API package for the token gateway.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and error handlers.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: header parsing + policy enforcement + delegation to services.
