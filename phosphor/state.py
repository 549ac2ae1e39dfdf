"""
Shared, read-only state handed to every tool registration function.
"""
from .assets import AssetFetcher
from .catalog import Catalog, default_catalog
from .config import PhosphorSettings


class ServerState:
    """Everything a handler needs: settings, the catalog and the asset fetcher.

    Nothing here is mutated after startup, so handlers share it freely.
    """

    def __init__(
        self,
        settings: PhosphorSettings = None,
        catalog: Catalog = None,
        fetcher: AssetFetcher = None,
    ):
        self.settings = settings if settings is not None else PhosphorSettings()
        self.catalog = catalog if catalog is not None else default_catalog()
        self.fetcher = fetcher if fetcher is not None else AssetFetcher()

    @property
    def default_weight(self) -> str:
        return self.settings.default_weight

    def resolve_weight(self, weight: str = None) -> str:
        return weight or self.settings.default_weight
