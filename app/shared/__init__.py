# app/shared/__init__.py
"""Settings and the dependency-injection container."""
