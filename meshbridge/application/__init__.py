"""
Application Layer Package

Use cases, DTOs and the services that make up the event/command pipeline.
"""
