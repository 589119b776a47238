import sys

from c8dc.cli import main

sys.exit(main())
