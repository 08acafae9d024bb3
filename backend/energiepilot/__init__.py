"""Energiepilot: subsidy eligibility and funding rate analysis for energy retrofits."""

__version__ = "1.0.0"
