import sys

from finance_tracker.cli import main

sys.exit(main())
