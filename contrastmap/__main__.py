import sys

from contrastmap.cli import main

sys.exit(main())
