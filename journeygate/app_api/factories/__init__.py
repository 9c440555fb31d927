"""Factory helpers for building catalogs, oracles and the app facade."""

from .build_app import build_journeygate_app

__all__ = ["build_journeygate_app"]
