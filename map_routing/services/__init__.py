"""Services layer - Application orchestration.

Available services:
- MapService: Stores the current map and answers route queries
"""

from .map_service import MapService

__all__ = ["MapService"]
