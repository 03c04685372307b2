import sys

from weatherstem.cli import main

sys.exit(main())
