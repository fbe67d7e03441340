"""
Domain layer - Business entities, schemas, enums and pure query logic.
"""

from domain import enums, schemas

__all__ = ["enums", "schemas"]
