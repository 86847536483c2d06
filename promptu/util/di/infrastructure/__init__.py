"""Infrastructure providers.

Importing the production classes registers them as subclasses of their
component base, which is how ``ProviderBase.implementation`` finds them.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
