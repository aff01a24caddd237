"""Probabilistic models for sequences over a user-defined alphabet."""

__version__ = "2.0.0a0"