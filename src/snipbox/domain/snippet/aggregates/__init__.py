from snipbox.domain.snippet.aggregates.snippet import Snippet

__all__ = ["Snippet"]
