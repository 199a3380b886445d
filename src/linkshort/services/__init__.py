"""Shared services module for external integrations."""

from src.linkshort.services.posthog import PostHogService

__all__ = [
    "PostHogService",
]
