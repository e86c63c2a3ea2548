import sys

from git_branch_sweeper.cli import main

sys.exit(main())
