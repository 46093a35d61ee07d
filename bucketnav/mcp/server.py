"""
bucketnav MCP Server

Single-tool MCP server that executes navigation commands.

Commands:
    pwd
    cd photos/2024
    ls -l
    help

Session state (the current location) persists between tool calls, so an
agent can cd once and list repeatedly.
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from bucketnav.api.shell import NavShell
from bucketnav.config import NavConfig

if TYPE_CHECKING:
    from bucketnav.storage.base import StorageClient

# Load .env file for credentials
load_dotenv()

_shell: NavShell | None = None


def get_shell() -> NavShell:
    """Get the NavShell instance."""
    if _shell is None:
        raise RuntimeError("NavShell not initialized. Call init_shell() first.")
    return _shell


def init_shell(config: NavConfig, storage: "StorageClient | None" = None) -> NavShell:
    """Initialize the NavShell instance (S3 storage unless one is given)."""
    global _shell
    if storage is None:
        from bucketnav.storage.s3 import S3Storage

        storage = S3Storage.from_config(config)
    _shell = NavShell(storage, config=config)
    return _shell


async def execute_command(command: str) -> str:
    """Execute a command line against the shared session."""
    shell = get_shell()
    # boto3 blocks; keep the event loop responsive
    output = await asyncio.to_thread(shell.execute, command)
    return output or "OK"


# =============================================================================
# MCP Server
# =============================================================================

def create_server(name: str = "bucketnav") -> FastMCP:
    """Create the MCP server with the nav_execute tool."""
    mcp = FastMCP(name)

    @mcp.tool()
    async def nav_execute(command: str) -> str:
        """
        Execute a bucketnav navigation command.

        The object store is presented as a filesystem: buckets are top-level
        directories, key prefixes ending in "/" are subdirectories.

        Commands:
           pwd                 - Show the current location
           cd <path>           - Change location (absolute "/bucket/a/" or relative "../b")
           ls [-l] [path]      - List buckets (at /), or prefixes and objects
           help                - Show command help

        Args:
            command: The command string to execute

        Returns:
            Command output as text; failures start with "Error:"
        """
        return await execute_command(command)

    return mcp


async def run_server(config: NavConfig) -> None:
    """Initialize the shell and run the MCP server."""
    init_shell(config)
    mcp = create_server()
    await mcp.run_stdio_async()


# =============================================================================
# CLI Entry Point
# =============================================================================

def main() -> None:
    """CLI entry point for the MCP server."""
    parser = argparse.ArgumentParser(
        description="bucketnav MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
    python -m bucketnav.mcp --endpoint-url http://localhost:9000

Claude Desktop config:
    {
        "mcpServers": {
            "bucketnav": {
                "command": "python",
                "args": ["-m", "bucketnav.mcp"]
            }
        }
    }
""",
    )
    parser.add_argument("--config", "-c", type=Path, help="TOML configuration file")
    parser.add_argument("--endpoint-url", help="S3-compatible endpoint URL")
    parser.add_argument("--region", "-r", help="Region name")
    parser.add_argument("--profile", "-p", help="AWS profile name")

    args = parser.parse_args()

    config = NavConfig.load(args.config).with_overrides(
        endpoint_url=args.endpoint_url,
        region_name=args.region,
        profile_name=args.profile,
    )
    asyncio.run(run_server(config))


if __name__ == "__main__":
    main()
