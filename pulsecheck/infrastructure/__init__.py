"""
Infrastructure Layer Package

Concrete probes talking to MongoDB, Redis, HTTP endpoints and object storage,
plus the service that aggregates them.
"""
