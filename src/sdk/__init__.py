"""SDK client layer.

This module binds ingest, simulation, and reporting to one runtime
configuration for programmatic and CLI use.
"""
