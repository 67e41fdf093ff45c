"""Core business logic layer.

Subpackages:
- metabolism: basal energy, expenditure and metabolic adaptation
- planning: the phase-by-phase plan engine
- reporting: read-only progress and chart queries over a plan
"""
__all__ = ["metabolism", "planning", "reporting"]
