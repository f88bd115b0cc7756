import sys

from periphgen.cli import main

sys.exit(main())
