import sys

from mcpconf.cli import main

sys.exit(main())
