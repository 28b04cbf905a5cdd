"""
Command modules for shp2mongo CLI
"""

from shp2mongo.commands.info import cmd_info_datasets, cmd_info_indexes
from shp2mongo.commands.load import cmd_import
from shp2mongo.commands.query import cmd_query

__all__ = [
    'cmd_info_datasets',
    'cmd_info_indexes',
    'cmd_import',
    'cmd_query',
]
