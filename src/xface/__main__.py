import sys

from xface.cli import main

sys.exit(main())
