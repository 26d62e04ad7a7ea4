"""Rescisão Calc - Brazilian severance (rescisão) calculation engine."""

__version__ = "0.1.0"
