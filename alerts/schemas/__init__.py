"""Pydantic schemas for the alert API."""

from alerts.schemas.base_schema_model import BaseSchemaModel

__all__ = ["BaseSchemaModel"]
