from typing import Any, Dict, Optional


class RepositoryError(Exception):
    """Opaque storage failure, tagged with the operation and entity ids involved"""

    def __init__(self, operation: str, context: Optional[Dict[str, Any]] = None):
        self.operation = operation
        self.context = context or {}
        super().__init__(f"{operation} failed")


class UniqueViolationError(RepositoryError):
    """Insert or update rejected by a uniqueness constraint"""
