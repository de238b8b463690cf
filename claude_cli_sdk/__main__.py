"""Allow running the SDK command line with ``python -m claude_cli_sdk``."""

from claude_cli_sdk.cli import main

if __name__ == "__main__":
    main()
