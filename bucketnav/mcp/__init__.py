"""
bucketnav MCP Server

Exposes the navigation shell via a single MCP tool (nav_execute) that
accepts command lines such as "cd photos/2024" or "ls -l".

Usage:
    # Run the MCP server
    python -m bucketnav.mcp --profile dev

    # Or in Claude Desktop config:
    {
        "mcpServers": {
            "bucketnav": {
                "command": "python",
                "args": ["-m", "bucketnav.mcp"]
            }
        }
    }
"""

from bucketnav.mcp.server import create_server, run_server

__all__ = ["create_server", "run_server"]
