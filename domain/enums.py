"""
Domain enums for DormDash application.
Contains all enumeration types used across the domain models.
"""

import enum


class UserRole(str, enum.Enum):
    """Marketplace role chosen at registration"""

    BUYER = "buyer"
    SELLER = "seller"
