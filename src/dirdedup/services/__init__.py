from .deletion_service import DeletionService

__all__ = ["DeletionService"]
