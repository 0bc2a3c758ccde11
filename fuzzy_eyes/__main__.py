import sys

from fuzzy_eyes.cli import main

sys.exit(main())
