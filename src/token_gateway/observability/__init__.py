"""
token_gateway.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation for consistent log enrichment.
- Prometheus metric definitions.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Tracing exporters can be added here without touching auth logic.
