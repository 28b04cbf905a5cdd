"""
importer.py
Imports shapefile datasets into MongoDB collections, one document per feature.

Each dataset gets its own MongoClient and worker thread. Within a dataset the
features are inserted strictly one after another; insert errors are logged and
skipped, setup errors abort the dataset.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Sequence

import fiona
from bson.errors import InvalidDocument
from pymongo import GEOSPHERE, MongoClient
from pymongo.errors import CollectionInvalid, OperationFailure, PyMongoError

from shp2mongo import config
from shp2mongo.load_db.converter import feature_to_document
from shp2mongo.utils.logger import get_logger

logger = get_logger()

# Server error code for "namespace already exists"
_NAMESPACE_EXISTS = 48


def ensure_collection(db, name: str):
    """
    Create collection `name` unless it exists, and return it.
    Any failure other than "already exists" propagates.
    """
    try:
        collection = db.create_collection(name)
    except CollectionInvalid:
        logger.info(f"Collection {name} already exists")
        return db[name]
    except OperationFailure as e:
        if e.code != _NAMESPACE_EXISTS:
            raise
        logger.info(f"Collection {name} already exists")
        return db[name]
    logger.info(f"Collection {name} created")
    return collection


def ensure_geo_index(collection, field: str = config.GEOMETRY_FIELD) -> str:
    """Create the 2dsphere index on `field` (a no-op if it already exists)."""
    index_name = collection.create_index([(field, GEOSPHERE)])
    logger.info(f"2dsphere index on {collection.name} created")
    return index_name


def shapefile_path(shp_dir, name: str) -> Path:
    return Path(shp_dir) / f"{name}.shp"


def stream_features(shp_path) -> Iterator[Any]:
    """
    Yield features from a shapefile one at a time.
    The file stays open only while the generator is being consumed.
    """
    with fiona.open(str(shp_path)) as src:
        for feature in src:
            yield feature


def insert_feature(collection, feature) -> bool:
    """
    Insert one feature as a document. Returns False if the insert failed;
    the failure is logged and not retried.
    """
    document = feature_to_document(feature)
    logger.info(f"insert feature in {collection.name} {document}")
    try:
        collection.insert_one(document)
    # DocumentTooLarge and unencodable values are bson errors, not PyMongoError
    except (PyMongoError, InvalidDocument, OverflowError) as e:
        logger.error(f"inserting error: {e}")
        return False
    return True


def import_dataset(
    name: str,
    uri: str = config.MONGO_URI,
    db_name: str = config.MONGO_DB_NAME,
    shp_dir=config.SHP_DIR,
    client_factory: Callable[..., Any] = MongoClient,
) -> Dict[str, Any]:
    """
    Import one dataset: ensure collection and index, then insert every
    feature of <shp_dir>/<name>.shp sequentially.

    Returns {"dataset": name, "inserted": n, "failed": m}.
    """
    client = client_factory(uri)
    try:
        db = client[db_name]
        collection = ensure_collection(db, name)
        ensure_geo_index(collection)

        inserted = 0
        failed = 0
        for feature in stream_features(shapefile_path(shp_dir, name)):
            if insert_feature(collection, feature):
                inserted += 1
            else:
                failed += 1
    finally:
        client.close()

    logger.info(f"Finished {name}: {inserted} inserted, {failed} failed")
    return {"dataset": name, "inserted": inserted, "failed": failed}


def import_all(
    datasets: Sequence[str] = config.DATASETS,
    uri: str = config.MONGO_URI,
    db_name: str = config.MONGO_DB_NAME,
    shp_dir=config.SHP_DIR,
    client_factory: Callable[..., Any] = MongoClient,
) -> List[Dict[str, Any]]:
    """
    Import all datasets concurrently and wait until every one of them is done.

    A dataset whose setup fails does not stop the others; once all are
    finished the first such error is re-raised.
    """
    datasets = list(datasets)
    results = {}
    errors = []
    if datasets:
        with ThreadPoolExecutor(max_workers=len(datasets)) as executor:
            future_to_name = {
                executor.submit(import_dataset, name, uri, db_name, shp_dir, client_factory): name
                for name in datasets
            }
            for future in as_completed(future_to_name):
                name = future_to_name[future]
                try:
                    results[name] = future.result()
                except Exception as e:
                    logger.error(f"Import of {name} aborted: {e}")
                    errors.append(e)

    if errors:
        raise errors[0]
    logger.info("done...")
    return [results[name] for name in datasets]
