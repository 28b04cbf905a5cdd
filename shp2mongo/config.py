from pathlib import Path
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_DB_NAME = "gis"
DEFAULT_SHP_DIR = "shp"

MONGO_URI = os.getenv("MONGO_URI", DEFAULT_MONGO_URI)
MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", DEFAULT_DB_NAME)
SHP_DIR = Path(os.getenv("SHP_DIR", DEFAULT_SHP_DIR))

# Dataset name doubles as shapefile stem and collection name
DATASETS = ("points", "linestrings", "polygons")

GEOMETRY_FIELD = "geometry"
