import sys

from skyglance.cli import main

sys.exit(main())
