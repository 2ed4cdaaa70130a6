"""Top-level package for Django configuration.

This package exposes the project configuration of the property catalogue.
It contains settings modules for different environments and entry points
for WSGI and ASGI.
"""
