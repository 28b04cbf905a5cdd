"""
Query command - Print the features of a collection that fall in a bounding box
"""

import json

from pymongo import MongoClient

from shp2mongo.query.featureset import query_features
from shp2mongo.utils.logger import get_logger

logger = get_logger()


def parse_bbox(value):
    """Parse 'minx,miny,maxx,maxy' into a tuple of floats."""
    parts = [p.strip() for p in value.split(',')]
    if len(parts) != 4:
        raise ValueError(f"bbox needs 4 comma-separated numbers, got {value!r}")
    return tuple(float(p) for p in parts)


def cmd_query(args):
    """Handle 'query' subcommand."""
    try:
        bbox = parse_bbox(args.bbox)
        extra_filter = json.loads(args.filter) if args.filter else None
    except ValueError as e:
        logger.error(f"Invalid query arguments: {e}")
        return 1

    client = MongoClient(args.uri)
    try:
        collection = client[args.db][args.collection]
        count = 0
        for feature in query_features(
            collection,
            bbox,
            index_2d=args.index_2d,
            extra_filter=extra_filter,
            limit=args.limit,
        ):
            print(json.dumps(feature, default=str))
            count += 1
    except ValueError as e:
        logger.error(f"Query failed: {e}")
        return 1
    finally:
        client.close()

    logger.info(f"{count} features in {args.collection} within {bbox}")
    return 0
