import sys

from chunksort.cli import main

sys.exit(main())
