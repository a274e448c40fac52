from __future__ import annotations


class ScraperError(Exception):
    """Base for every failure surfaced to API callers as ``{success: false}``."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class UpstreamFetchFailed(ScraperError):
    default_message = "Request failed"


class EmptyResponse(ScraperError):
    default_message = "Empty HTML response"


class DetailNotFound(ScraperError):
    default_message = "Detail title not found"


class EpisodeListNotFound(ScraperError):
    default_message = "Episode list not found"


class NoPlayableLinks(ScraperError):
    default_message = "No playable links found"


class InvalidInput(ScraperError):
    status_code = 400
    default_message = "Slug is required"
