import sys

from menucalc.cli import main

sys.exit(main())
