#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache
from typing import Generator

from core.app_context import AppContext
from database.repository import MarketplaceRepository
from database.uow import marketplace_uow
from .config import get_config


def get_repository() -> Generator[MarketplaceRepository, None, None]:
    """
    FastAPI dependency that yields a repository bound to one transaction.

    Commits when the request completes, rolls back if it raises.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(repo: MarketplaceRepository = Depends(get_repository)):
            ...
    """
    with marketplace_uow() as repo:
        yield repo


@lru_cache()
def get_app_context() -> AppContext:
    """Wired scorers and pipeline, built once per process."""
    return AppContext.build(get_config())
