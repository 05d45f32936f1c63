"""Static catalog of business paths."""

from bizpath.catalog.models import BusinessPath
from bizpath.catalog.paths import BUSINESS_PATHS, business_path_ids, get_business_path

__all__ = ["BUSINESS_PATHS", "BusinessPath", "business_path_ids", "get_business_path"]
