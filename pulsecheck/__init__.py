"""
pulsecheck - Source Root Module

Health-check aggregation service: runs dependency probes, aggregates their
results into an overall status and exposes it over HTTP.

Layer Structure:
- Domain: Probe capability, health entities and pure evaluation rules
- Application: Use cases and response DTOs
- Infrastructure: Concrete probes and the aggregating health check service
- Presentation: FastAPI controllers for /health, /ready and /ping
- Shared: Cross-cutting concerns (logging, enums)
- Main: Composition root, settings and application entry point
"""

__version__ = "1.0.0"
