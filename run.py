#!/usr/bin/env python3
"""
Point d'entree principal pour lancer l'API Quick Click Adverts.

Usage:
------
    python3 run.py
    # ou directement:
    uvicorn src.presentation.api.main:app --reload

Variables d'environnement:
--------------------------
- HOST: Interface d'ecoute (defaut: 127.0.0.1)
- PORT: Port d'ecoute (defaut: 8000)
- ENV: "production" pour des logs JSON et sans rechargement

Note:
-----
Pour le deploiement, utiliser plutot:
    ENV=production uvicorn src.presentation.api.main:app --host 0.0.0.0 --port $PORT
"""
import os

import uvicorn


def main():
    """Lance l'API avec uvicorn"""
    is_production = os.getenv("ENV", "development") == "production"
    uvicorn.run(
        "src.presentation.api.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=not is_production,
        log_config=None,
    )


if __name__ == "__main__":
    main()
