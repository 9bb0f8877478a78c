import sys

from atlas_diff.entry_points import main

sys.exit(main())
