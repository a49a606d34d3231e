import sys

from valsi.cli import main

sys.exit(main())
