"""Regulatory compliance assessment.

This module classifies compliance rates, evaluates tracked regimes,
and assembles report payloads from simulation output.
"""
