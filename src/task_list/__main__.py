"""Entry point for running as a module: python -m task_list"""

import sys

from task_list.demo import main

if __name__ == "__main__":
    sys.exit(main())
