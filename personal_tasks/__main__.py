from __future__ import annotations

from personal_tasks.cli import main

if __name__ == "__main__":
    main()
