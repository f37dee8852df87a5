"""Application factories for repository access."""

from giftroom.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
