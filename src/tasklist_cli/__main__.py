"""Run the task list menu: ``python -m tasklist_cli``."""

import sys

from tasklist_cli.cli.app import main

if __name__ == "__main__":
    sys.exit(main())
