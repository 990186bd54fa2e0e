# File Chain (see DEVELOPER.md):
# Doc Version: v1.0.0
#
# - Called by: Python interpreter when running `python -m levelstyle`
# - Reads from: None (entry point only)
# - Writes to: None (calls main() and exits with its return code)
# - Calls into: src/levelstyle/main.main()
"""Allow running the package with python -m levelstyle (same as the levelstyle console script)."""
import sys

from levelstyle.main import main

sys.exit(main())
