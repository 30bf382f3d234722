"""
token_gateway.services

Business services behind the protected routes.
"""

# Package marker.
