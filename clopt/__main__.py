import sys

from clopt.cli import main

sys.exit(main())
