"""Infrastructure providers."""

# Implementations are imported so the bases see them as subclasses
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
