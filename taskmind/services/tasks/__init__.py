"""Task service module."""

from taskmind.services.tasks.service import TaskService

__all__ = ["TaskService"]
