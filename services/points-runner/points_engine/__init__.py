"""
Points projection engine
Projection deterministe des points d'un joueur NBA a partir de la ligne et du contexte
"""

__version__ = "0.1.0"
