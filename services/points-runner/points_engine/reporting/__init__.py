"""
Module de restitution des projections
Rapport texte lisible par un humain
"""
from .formatter import format_projection, format_run_summary

__all__ = ["format_projection", "format_run_summary"]
