import sys

from photo_strip.cli import main

sys.exit(main())
