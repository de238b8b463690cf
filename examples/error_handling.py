"""Handling SDK errors and bounding a query with a deadline."""

import anyio

from claude_cli_sdk import (
    ClaudeSDKError,
    CLIConnectionError,
    CLIJSONDecodeError,
    CLINotFoundError,
    ProcessError,
    query,
)


async def main() -> None:
    try:
        # query() stops the CLI process when the deadline cancels it.
        with anyio.fail_after(60):
            async for message in query("Hello, Claude!"):
                print(message)
    except TimeoutError:
        print("Query took longer than 60 seconds")
    except CLINotFoundError as e:
        print("Claude Code CLI not found")
        print(e)
        print("\nTo install it:\n  npm install -g @anthropic-ai/claude-code")
    except CLIConnectionError as e:
        print(f"Failed to start Claude Code: {e}")
    except ProcessError as e:
        print(f"Claude Code failed with exit code {e.exit_code}")
        if e.stderr:
            print(f"Error output:\n{e.stderr}")
    except CLIJSONDecodeError as e:
        print(f"Unreadable CLI output: {e.original_error}")
    except ClaudeSDKError as e:
        print(f"SDK error: {e}")


if __name__ == "__main__":
    anyio.run(main)
