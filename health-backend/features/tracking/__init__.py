"""Tracking feature: ORM models and repositories for logged health events."""

from __future__ import annotations

from . import db_models, repositories, schemas

__all__ = ["db_models", "repositories", "schemas"]
