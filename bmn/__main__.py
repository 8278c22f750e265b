import sys

from bmn.cli import main

sys.exit(main())
