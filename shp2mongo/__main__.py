import sys

from shp2mongo.cli import main

if __name__ == '__main__':
    sys.exit(main())
