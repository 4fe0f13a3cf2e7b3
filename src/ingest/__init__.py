"""Telemetry ingestion pipeline.

This module reads uploaded delimited exports and normalizes them.
It produces canonical monthly records for the simulation engine.
"""
