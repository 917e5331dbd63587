import sys

from structid.cli import main

sys.exit(main())
