"""CLI package for the books catalogue"""
from .main import cli

__all__ = ['cli']
