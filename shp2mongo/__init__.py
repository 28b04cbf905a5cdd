"""
shp2mongo - import point, linestring and polygon shapefiles into MongoDB
collections with 2dsphere geometry indexes, and query them back by bounding box.
"""

__version__ = "0.1.0"
