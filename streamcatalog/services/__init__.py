from streamcatalog.services.catalog_service import CatalogService

__all__ = ["CatalogService"]
