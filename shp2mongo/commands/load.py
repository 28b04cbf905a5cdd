"""
Import command - Load the point, linestring and polygon shapefiles into MongoDB
"""

from shp2mongo import config
from shp2mongo.load_db.importer import import_all
from shp2mongo.utils.logger import get_logger

logger = get_logger()


def parse_datasets(value):
    """Split a comma-separated dataset list; None means all datasets."""
    if not value:
        return list(config.DATASETS)
    return [name.strip() for name in value.split(',') if name.strip()]


def cmd_import(args):
    """Handle 'import' subcommand."""
    datasets = parse_datasets(args.datasets)
    invalid = [name for name in datasets if name not in config.DATASETS]
    if invalid:
        logger.error(f"Unknown datasets: {invalid} (expected one of {list(config.DATASETS)})")
        return 1

    logger.info(f"Importing {datasets} from {args.shp_dir} into {args.uri} database {args.db}")
    # Setup errors are not caught here: they end the run with a traceback
    results = import_all(datasets, uri=args.uri, db_name=args.db, shp_dir=args.shp_dir)
    for result in results:
        logger.info(f"  {result['dataset']:12s} inserted={result['inserted']} failed={result['failed']}")
    return 0
