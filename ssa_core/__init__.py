# ssa_core/__init__.py
"""Lossless codec for the Format-driven sections of ASS/SSA subtitle scripts."""

__version__ = '0.1.0'
