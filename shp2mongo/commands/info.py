"""
Info command - Display the configured datasets and the indexes on their collections
"""

from pymongo import MongoClient

from shp2mongo import config
from shp2mongo.load_db.importer import shapefile_path


def cmd_info_datasets(args):
    """Handle 'info datasets' subcommand."""
    print("\nDatasets:")
    print("=" * 70)
    for name in config.DATASETS:
        path = shapefile_path(args.shp_dir, name)
        status = "found" if path.exists() else "missing"
        print(f"  {name:12s} - {path} ({status})")
    return 0


def cmd_info_indexes(args):
    """Handle 'info indexes' subcommand."""
    names = [args.collection] if args.collection else list(config.DATASETS)
    client = MongoClient(args.uri)
    try:
        db = client[args.db]
        for name in names:
            print(f"\nIndexes on {args.db}.{name}:")
            print("=" * 70)
            for index_name, info in db[name].index_information().items():
                print(f"  {index_name:24s} - {info['key']}")
    finally:
        client.close()
    return 0
