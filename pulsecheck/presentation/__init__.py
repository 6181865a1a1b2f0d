"""
Presentation Layer Package

HTTP controllers exposing the health engine.
"""
