import sys

from lingosheet.cli import main

sys.exit(main())
