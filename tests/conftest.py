"""
Shared fixtures: small shapefiles written with fiona, and MongoClient doubles.
"""
from unittest.mock import MagicMock

import fiona
import pytest


POINT_SCHEMA = {'geometry': 'Point', 'properties': {'name': 'str', 'pop': 'int'}}
LINE_SCHEMA = {'geometry': 'LineString', 'properties': {'name': 'str'}}
POLYGON_SCHEMA = {'geometry': 'Polygon', 'properties': {'name': 'str'}}

POINT_FEATURES = [
    {'geometry': {'type': 'Point', 'coordinates': (30.52, 50.45)}, 'properties': {'name': 'Kyiv', 'pop': 2952301}},
    {'geometry': {'type': 'Point', 'coordinates': (24.03, 49.84)}, 'properties': {'name': 'Lviv', 'pop': 717273}},
]
LINE_FEATURES = [
    {'geometry': {'type': 'LineString', 'coordinates': [(30.0, 50.0), (31.0, 51.0), (32.0, 51.5)]}, 'properties': {'name': 'Dnipro'}},
]
POLYGON_FEATURES = [
    {
        'geometry': {'type': 'Polygon', 'coordinates': [[(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)]]},
        'properties': {'name': 'square'},
    },
]


def write_shapefile(path, schema, features):
    """Write features to an ESRI shapefile (an empty list gives a 0-feature file)."""
    with fiona.open(str(path), 'w', driver='ESRI Shapefile', schema=schema, crs='EPSG:4326') as dst:
        for feature in features:
            dst.write(feature)
    return path


@pytest.fixture
def shp_dir(tmp_path):
    """Directory with points.shp, linestrings.shp and polygons.shp."""
    write_shapefile(tmp_path / 'points.shp', POINT_SCHEMA, POINT_FEATURES)
    write_shapefile(tmp_path / 'linestrings.shp', LINE_SCHEMA, LINE_FEATURES)
    write_shapefile(tmp_path / 'polygons.shp', POLYGON_SCHEMA, POLYGON_FEATURES)
    return tmp_path


class FakeMongo:
    """
    Stands in for MongoClient: every call returns a new client mock whose
    database hands out one shared collection mock per name.
    """

    def __init__(self):
        self.collections = {}
        self.clients = []
        self.db_names = []

    def collection(self, name):
        if name not in self.collections:
            collection = MagicMock()
            collection.name = name
            collection.create_index.return_value = 'geometry_2dsphere'
            self.collections[name] = collection
        return self.collections[name]

    def __call__(self, uri):
        client = MagicMock()
        db = MagicMock()
        db.create_collection.side_effect = self.collection

        def get_db(db_name):
            self.db_names.append(db_name)
            return db

        client.__getitem__.side_effect = get_db
        client.uri = uri
        self.clients.append(client)
        return client


@pytest.fixture
def fake_mongo():
    return FakeMongo()
