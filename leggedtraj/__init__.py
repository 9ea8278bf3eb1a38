"""Splines, node and phase-duration variables, gaits, rigid-body dynamics and constraint terms for legged-robot trajectory optimization."""

__version__ = "0.1.0"