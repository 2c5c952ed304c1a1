import sys

from chord_detector.cli import main

sys.exit(main())
