"""
Shapefile to MongoDB loading.
"""
from .converter import feature_to_document, geometry_to_geojson
from .importer import (
    ensure_collection,
    ensure_geo_index,
    stream_features,
    insert_feature,
    import_dataset,
    import_all,
)

__all__ = [
    "feature_to_document", "geometry_to_geojson",
    "ensure_collection", "ensure_geo_index", "stream_features",
    "insert_feature", "import_dataset", "import_all",
]
