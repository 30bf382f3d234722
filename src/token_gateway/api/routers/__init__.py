"""
token_gateway.api.routers

HTTP routers: health, metrics, authenticate and the protected stuff resource.
"""

# Package marker.
