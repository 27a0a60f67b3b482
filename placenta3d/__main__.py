import sys

from placenta3d.cli import main

sys.exit(main())
