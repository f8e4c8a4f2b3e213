"""Application factories for repository access."""

from storerate.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
