"""
Domain Layer Package

The probe capability, health value objects and the evaluation rules, free of
any framework or client library.
"""

from pulsecheck.domain import entities, ports, services

__all__ = ["entities", "ports", "services"]
