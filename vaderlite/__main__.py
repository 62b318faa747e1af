import sys

from vaderlite.cli import main

sys.exit(main())
