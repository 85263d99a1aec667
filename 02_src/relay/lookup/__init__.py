"""Product lookup module."""

from .fetcher import IProductLookup, ProductLookup, QueryParams

__all__ = ["IProductLookup", "ProductLookup", "QueryParams"]
