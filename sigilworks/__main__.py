import sys

from sigilworks.cli import main

sys.exit(main())
