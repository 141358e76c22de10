"""Parking Simulator: a single parking facility with hourly billing and a daily ledger"""

__version__ = "1.0.0"
