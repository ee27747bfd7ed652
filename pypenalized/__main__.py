import sys

from pypenalized.cli import main

sys.exit(main())
