import sys

from ytsearch.cli import main

sys.exit(main())
