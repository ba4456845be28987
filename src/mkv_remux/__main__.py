"""Allow running as ``python -m mkv_remux``."""

from mkv_remux.cli import main

if __name__ == "__main__":
    main()
