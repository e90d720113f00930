"""Solvers for introductory and league competitive-programming problems."""

__version__ = "0.1.0"
__all__ = ["cli", "intro2024", "league1_novice", "league1_veteran", "league2_novice"]