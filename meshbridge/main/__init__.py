"""
Main Layer Package

Composition root: settings, dependency injection container and the FastAPI
application entry point.
"""
