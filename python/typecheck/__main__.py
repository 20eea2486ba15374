import sys

from typecheck.cli import main

sys.exit(main())
