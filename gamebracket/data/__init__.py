from .catalog import CatalogClient, SearchResults
from .loader import DataLoader

__all__ = ["CatalogClient", "DataLoader", "SearchResults"]
