import sys

from helium.rewards.cli import main

sys.exit(main())
