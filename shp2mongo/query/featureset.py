"""
featureset.py
Reads imported features back out of MongoDB by bounding box.

The default filter is $geoIntersects against the 2dsphere index created on
import. Collections indexed with a legacy 2d index on the coordinates can be
queried with a $box filter instead (index_2d=True).
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional, Tuple

from bson.decimal128 import Decimal128

from shp2mongo.config import GEOMETRY_FIELD
from shp2mongo.utils.logger import get_logger

logger = get_logger()

BBox = Tuple[float, float, float, float]

WORLD_EXTENT: BBox = (-180.0, -90.0, 180.0, 90.0)

GEOMETRY_TYPES = ("Point", "LineString", "Polygon")


def envelope(extent: Optional[BBox] = None) -> BBox:
    """Configured extent of a layer, or the whole world when none is set."""
    if extent:
        return tuple(extent)
    return WORLD_EXTENT


def bbox_polygon(bbox: BBox) -> Dict[str, Any]:
    minx, miny, maxx, maxy = bbox
    return {
        "type": "Polygon",
        "coordinates": [[
            [minx, miny],
            [maxx, miny],
            [maxx, maxy],
            [minx, maxy],
            [minx, miny],
        ]],
    }


def geo_filter(
    bbox: BBox,
    geometry_field: str = GEOMETRY_FIELD,
    index_2d: bool = False,
    extra_filter: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build the find() filter selecting documents whose geometry touches bbox.

    Raises ValueError for boxes wider or taller than 180 degrees: a polygon
    that large is ambiguous on the sphere.
    """
    minx, miny, maxx, maxy = bbox
    if abs(maxx - minx) > 180 or abs(maxy - miny) > 180:
        raise ValueError("try to query more than a single hemisphere")

    if index_2d:
        query = {
            f"{geometry_field}.coordinates": {
                "$geoWithin": {"$box": [[minx, miny], [maxx, maxy]]}
            }
        }
    else:
        query = {
            geometry_field: {
                "$geoIntersects": {"$geometry": bbox_polygon(bbox)}
            }
        }
    if extra_filter:
        # $and keeps a filter on the geometry field from replacing the bbox predicate
        query = {"$and": [query, extra_filter]}
    return query


def _epoch_millis(value: datetime) -> int:
    if value.tzinfo is None:
        # pymongo hands back naive UTC datetimes by default
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def read_properties(document: Mapping, geometry_field: str = GEOMETRY_FIELD, into: Optional[dict] = None) -> Dict[str, Any]:
    """
    Flatten a stored document into a single-level attribute dict.

    Nested documents are merged into the result unless they look like GeoJSON
    geometries. Values of types that have no attribute equivalent (ObjectId,
    arrays, binary...) are dropped.
    """
    props = {} if into is None else into
    for key, value in document.items():
        if key == geometry_field:
            continue
        if isinstance(value, (bool, int, float, str)):
            props[key] = value
        elif isinstance(value, datetime):
            props[key] = _epoch_millis(value)
        elif isinstance(value, Decimal128):
            props[key] = str(value)
        elif isinstance(value, Mapping):
            if "coordinates" not in value:
                read_properties(value, geometry_field, props)
        else:
            logger.debug(f"{key} of type {type(value).__name__} ignored")
    return props


def query_features(
    collection,
    bbox: BBox,
    geometry_field: str = GEOMETRY_FIELD,
    index_2d: bool = False,
    extra_filter: Optional[Dict[str, Any]] = None,
    limit: int = 0,
) -> Iterator[Dict[str, Any]]:
    """
    Yield {"id", "geometry", "properties"} records for documents in bbox.
    Ids are assigned sequentially from 0 in cursor order.
    """
    cursor = collection.find(geo_filter(bbox, geometry_field, index_2d, extra_filter))
    if limit:
        cursor = cursor.limit(limit)

    feature_id = 0
    for document in cursor:
        geometry = document.get(geometry_field)
        if not isinstance(geometry, Mapping):
            # a document without usable geometry ends the featureset
            break
        yield {
            "id": feature_id,
            "geometry": dict(geometry),
            "properties": read_properties(document, geometry_field),
        }
        feature_id += 1
    logger.debug(f"done featureset on {collection.name}: count: {feature_id}")


def features_at_point(
    collection,
    x: float,
    y: float,
    tolerance: float = 0.0,
    geometry_field: str = GEOMETRY_FIELD,
    index_2d: bool = False,
    extra_filter: Optional[Dict[str, Any]] = None,
) -> Iterator[Dict[str, Any]]:
    box = (x - tolerance, y - tolerance, x + tolerance, y + tolerance)
    return query_features(collection, box, geometry_field, index_2d, extra_filter)


def geometry_type(collection, geometry_field: str = GEOMETRY_FIELD) -> Optional[str]:
    """
    Guess the geometry type of a collection from one of its documents.
    Returns None for empty collections and for types other than
    Point, LineString and Polygon.
    """
    document = collection.find_one({geometry_field: {"$exists": True}})
    if not document:
        return None
    geometry = document[geometry_field]
    if not isinstance(geometry, Mapping):
        return None
    geom_type = geometry.get("type")
    if geom_type in GEOMETRY_TYPES:
        return geom_type
    return None
