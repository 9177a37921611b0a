"""Global engine and catalog instances to avoid circular imports."""

from .catalog import CatalogStore
from .core.engine import MatchEngine

# The engine is stateless; the store is replaced wholesale on reload
match_engine = MatchEngine()
catalog_store = CatalogStore()
