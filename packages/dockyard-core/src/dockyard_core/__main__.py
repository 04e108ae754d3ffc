"""Allow running the dashboard with `python -m dockyard_core`."""

from dockyard_core.cli.main import main

if __name__ == "__main__":
    main()
