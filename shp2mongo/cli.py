"""
cli.py - Command-line interface for importing shapefiles into MongoDB and querying them
"""

import sys
import argparse

from shp2mongo import config
from shp2mongo.commands import cmd_info_datasets, cmd_info_indexes, cmd_import, cmd_query
from shp2mongo.utils.logger import get_logger, setup_logger

logger = get_logger()


def build_parser():
    parser = argparse.ArgumentParser(
        description='Shapefile to MongoDB import tool',
        epilog="""
Examples:
  # Import shp/points.shp, shp/linestrings.shp and shp/polygons.shp into the 'gis' database:
  python -m shp2mongo import

  # Import only the polygons from another directory:
  python -m shp2mongo import --shp-dir data/shp --datasets polygons

  # Features of the points collection around Kyiv:
  python -m shp2mongo query points --bbox 30.2,50.3,30.8,50.6

  # Show datasets and where their shapefiles are expected:
  python -m shp2mongo info datasets

  # Show the indexes of the imported collections:
  python -m shp2mongo info indexes
""",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    # Global arguments
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose (DEBUG) logging output')
    parser.add_argument('--quiet', '-q', action='store_true', help='Enable quiet mode (WARNING and ERROR only)')
    parser.add_argument('--uri', default=config.MONGO_URI, help=f'MongoDB connection URI (default: {config.MONGO_URI})')
    parser.add_argument('--db', default=config.MONGO_DB_NAME, help=f'Database name (default: {config.MONGO_DB_NAME})')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # ========== IMPORT COMMAND ==========
    import_parser = subparsers.add_parser('import', help='Import shapefiles into MongoDB collections')
    import_parser.set_defaults(func=cmd_import)
    import_parser.add_argument('--shp-dir', default=config.SHP_DIR, help=f'Directory holding <dataset>.shp files (default: {config.SHP_DIR})')
    import_parser.add_argument('--datasets', type=str, default=None, help='Comma-separated datasets (default: points,linestrings,polygons)')

    # ========== QUERY COMMAND ==========
    query_parser = subparsers.add_parser('query', help='Print features of a collection inside a bounding box')
    query_parser.set_defaults(func=cmd_query)
    query_parser.add_argument('collection', help='Collection to query (e.g. points)')
    query_parser.add_argument('--bbox', required=True, help='Bounding box as minx,miny,maxx,maxy (lon/lat)')
    query_parser.add_argument('--index-2d', action='store_true', help='Use a $box filter for collections with a legacy 2d index')
    query_parser.add_argument('--filter', type=str, default=None, help='Extra MongoDB filter as JSON, e.g. \'{"properties.kind": "river"}\'')
    query_parser.add_argument('--limit', type=int, default=0, help='Maximum number of features (default: no limit)')

    # ========== INFO COMMAND ==========
    info_parser = subparsers.add_parser('info', help='Information commands (datasets, indexes)')
    info_subparsers = info_parser.add_subparsers(dest='info_command', help='Info subcommands', required=True)

    datasets_parser = info_subparsers.add_parser('datasets', help='List datasets and their shapefiles')
    datasets_parser.set_defaults(func=cmd_info_datasets)
    datasets_parser.add_argument('--shp-dir', default=config.SHP_DIR, help=f'Directory holding <dataset>.shp files (default: {config.SHP_DIR})')

    indexes_parser = info_subparsers.add_parser('indexes', help='List indexes of the dataset collections')
    indexes_parser.set_defaults(func=cmd_info_indexes)
    indexes_parser.add_argument('collection', nargs='?', default=None, help='Only this collection (default: all datasets)')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logger()
    if args.quiet:
        logger.setLevel(30)
    elif args.verbose:
        logger.setLevel(10)
    else:
        logger.setLevel(20)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting.")
        return 130


if __name__ == '__main__':
    sys.exit(main())
