"""
Bounding-box reads over imported collections.
"""
from .featureset import (
    WORLD_EXTENT,
    envelope,
    geo_filter,
    read_properties,
    query_features,
    features_at_point,
    geometry_type,
)

__all__ = [
    "WORLD_EXTENT", "envelope", "geo_filter", "read_properties",
    "query_features", "features_at_point", "geometry_type",
]
