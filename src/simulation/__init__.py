"""Hydrogen blend compliance simulation.

This module recomputes emissions under a blend percentage and searches
for the smallest blend that brings a facility into compliance.
"""
