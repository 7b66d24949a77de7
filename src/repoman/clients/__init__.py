"""External collaborator interfaces and in-memory implementations."""

from .base import IdentityResolver, RepositoryClient
from .inmemory import InMemoryRepositoryClient, StaticIdentityResolver, WriteRecord

__all__ = [
    "IdentityResolver",
    "InMemoryRepositoryClient",
    "RepositoryClient",
    "StaticIdentityResolver",
    "WriteRecord",
]
