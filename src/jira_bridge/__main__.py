"""Entry point for running the Jira bridge server: python -m jira_bridge"""

from jira_bridge.server import mcp


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
