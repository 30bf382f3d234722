"""
token_gateway.auth

Authentication/authorization package.

Responsibilities:
- Identity model and auth error taxonomy.
- Credential verifier boundary, token store and access policy engine.
- FastAPI auth dependencies.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing in this package imports the API layer; `deps` is the only FastAPI seam.
