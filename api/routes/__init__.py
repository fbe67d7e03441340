"""API routes package"""

from . import meals, users, origins, uploads, health

__all__ = ["meals", "users", "origins", "uploads", "health"]
