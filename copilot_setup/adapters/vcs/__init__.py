from .git import GitFetcher

__all__ = ["GitFetcher"]
