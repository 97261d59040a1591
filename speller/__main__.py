import sys

from speller.cli import main

sys.exit(main())
