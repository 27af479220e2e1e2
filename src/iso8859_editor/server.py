"""MCP server exposing the ISO-8859-1 file tools over stdio.

stdout carries the protocol, so all logging goes to stderr.
"""
import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Annotated, Any, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from . import __version__
from .agent import IsoFileSystem
from .config import LOG_LEVEL_ENV, EditorConfig

logger = logging.getLogger(__name__)

SERVER_NAME = "iso8859-editor"


def _unwrap(result: dict[str, Any]) -> dict[str, Any]:
    if result.get("isError"):
        raise ToolError(f"Error: {result['message']}")
    return result


def create_server(config: Optional[EditorConfig] = None) -> FastMCP:
    """Build the MCP server with the three file tools registered.

    Args:
        config: Editor configuration (defaults to environment settings)

    Returns:
        Configured FastMCP server
    """
    fs = IsoFileSystem(config)
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool()
    async def write_file_iso(
        filePath: Annotated[str, Field(description="Absolute path to the file")],
        content: Annotated[
            str, Field(description="File content (converted to ISO-8859-1)")
        ],
    ) -> dict[str, Any]:
        """Create a file in ISO-8859-1 encoding from UTF-8 input."""
        return _unwrap(await asyncio.to_thread(fs.create_file, filePath, content))

    @mcp.tool()
    async def edit_file_iso(
        filePath: Annotated[str, Field(description="Absolute path to the file")],
        startLine: Annotated[int, Field(ge=1, description="Start line (1-based)")],
        endLine: Annotated[
            int, Field(ge=1, description="End line (inclusive, 1-based)")
        ],
        newContent: Annotated[str, Field(description="Replacement content")],
    ) -> dict[str, Any]:
        """Replace a line range of an ISO-8859-1 file.

        Encoding and line endings are preserved and a backup is taken first.
        """
        return _unwrap(
            await asyncio.to_thread(
                fs.edit_file, filePath, startLine, endLine, newContent
            )
        )

    @mcp.tool()
    async def read_file_iso(
        filePath: Annotated[str, Field(description="Absolute path to the file")],
    ) -> dict[str, Any]:
        """Read an ISO-8859-1 file and return its content as UTF-8."""
        return _unwrap(await asyncio.to_thread(fs.read_file, filePath))

    return mcp


def build_config(args: argparse.Namespace) -> EditorConfig:
    """Apply command-line overrides on top of the environment."""
    config = EditorConfig.from_env()

    base_path = None if args.unrestricted else args.base_path or config.base_path
    backup_root = args.backup_root or config.backup_root
    return EditorConfig(base_path=base_path, backup_root=backup_root)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="MCP server for editing ISO-8859-1 files from UTF-8 clients",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--base-path", type=Path, help="Refuse paths outside this directory"
    )
    parser.add_argument(
        "--unrestricted",
        action="store_true",
        help="Accept any absolute path (ignores --base-path)",
    )
    parser.add_argument(
        "--backup-root", type=Path, help="Directory holding the backup store"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=os.environ.get(LOG_LEVEL_ENV, "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None):
    args = parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level,
        format="[%(asctime)s][%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
        logger.info(
            f"Starting {SERVER_NAME} {__version__} "
            f"(base path: {config.base_path or 'unrestricted'}, "
            f"backup root: {config.backup_root})"
        )
        create_server(config).run()
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("MCP server failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
