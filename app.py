"""Launcher for the Task List demo from a source checkout."""

import sys
from pathlib import Path

# Add src directory to Python path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from task_list.demo import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
