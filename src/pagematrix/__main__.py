import sys

from pagematrix.cli import main

sys.exit(main())
