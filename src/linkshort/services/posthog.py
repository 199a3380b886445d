"""PostHog analytics service for event tracking."""

import posthog

from src.linkshort.config import settings


class PostHogService:
    """Service for tracking product events via PostHog."""

    def __init__(self) -> None:
        if settings.posthog_api_key:
            posthog.api_key = settings.posthog_api_key
            posthog.host = settings.posthog_host

    def capture(self, distinct_id: str, event: str, properties: dict | None = None) -> None:
        """
        Track an event. No-op when no API key is configured.

        Args:
            distinct_id: Unique identifier for the user ("anonymous" when signed out)
            event: Event name (e.g., "dashboard_viewed", "authentication_failed")
            properties: Optional event properties

        Example:
            >>> PostHogService().capture("user_2abc", "dashboard_viewed")
        """
        if not settings.posthog_api_key:
            return

        posthog.capture(distinct_id=distinct_id, event=event, properties=properties or {})
