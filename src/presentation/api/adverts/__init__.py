"""
Adverts API - Recherche et publication d'annonces.
"""
