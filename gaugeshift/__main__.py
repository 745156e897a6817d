import sys

from gaugeshift.cli import main

sys.exit(main())
