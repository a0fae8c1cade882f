import sys

from .game import main

sys.exit(main())
