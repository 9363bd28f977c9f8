"""
Infrastructure Layer Package

Concrete implementations of the domain interfaces: the registry HTTP
gateway, in-process broadcast channels and the state stores.
"""
