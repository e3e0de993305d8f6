import sys

from cfmlfmt.cli import main

sys.exit(main())
