"""External service clients."""

from .completion import CompletionService, EventSearchService, ThrottledCompletion

__all__ = ["CompletionService", "EventSearchService", "ThrottledCompletion"]
