import sys

from shortcuts.config import main

sys.exit(main())
