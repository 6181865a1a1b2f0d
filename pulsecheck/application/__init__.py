"""
Application Layer Package

Use cases and DTOs sitting between the presentation controllers and the
health check service port.
"""
