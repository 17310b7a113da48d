import sys

from cfgkit.cli import main

sys.exit(main())
