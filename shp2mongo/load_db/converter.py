"""
converter.py
Turns fiona shapefile features into GeoJSON Feature documents for MongoDB.
"""

from typing import Any, Dict

from shapely.geometry import mapping, shape


def _listify(value):
    # shapely's mapping() returns nested tuples; store arrays as lists
    if isinstance(value, (list, tuple)):
        return [_listify(v) for v in value]
    if isinstance(value, dict):
        return {k: _listify(v) for k, v in value.items()}
    return value


def _feature_id(raw_id):
    if isinstance(raw_id, str) and raw_id.isdigit():
        return int(raw_id)
    return raw_id


def geometry_to_geojson(geometry) -> Dict[str, Any]:
    """
    Normalize a fiona geometry (or anything with __geo_interface__) into a
    plain GeoJSON geometry dict. Returns None for a missing geometry.
    """
    if geometry is None:
        return None
    return _listify(mapping(shape(geometry)))


def feature_to_document(feature) -> Dict[str, Any]:
    """
    Convert one shapefile feature into the document stored in MongoDB.

    The document is a GeoJSON Feature: attributes live under "properties"
    and the geometry under "geometry", which is the field the 2dsphere
    index covers.
    """
    properties = feature['properties'] or {}
    return {
        "type": "Feature",
        "id": _feature_id(feature['id']),
        "geometry": geometry_to_geojson(feature['geometry']),
        "properties": {key: value for key, value in properties.items()},
    }
