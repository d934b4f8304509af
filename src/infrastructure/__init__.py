"""
Infrastructure Layer - Adapters techniques.

Cette couche contient les implementations concretes des ports definis
dans le domaine. Elle gere:
- Base de donnees (SQLAlchemy, PostgreSQL / SQLite)
- Logging structure (structlog)
- Assemblage des dependances (Container)

Les sous-modules sont importes explicitement, ce paquet n'exporte rien.
"""
