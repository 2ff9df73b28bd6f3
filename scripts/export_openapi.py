"""
Export the OpenAPI document without starting a server.

Builds the application, asks FastAPI for its generated schema and writes
it as JSON.

Usage:
    python scripts/export_openapi.py --output docs/openapi.json
"""

import argparse
import json
import logging
from pathlib import Path

from app.main import create_app
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("docs") / "openapi.json"


def export_openapi(output: Path, server_url: str | None = None) -> dict:
    """Write the application's OpenAPI document to ``output``.

    Args:
        output: Destination file. Parent directories are created.
        server_url: Optional base URL recorded in the document's ``servers``.

    Returns:
        The OpenAPI document that was written.
    """
    schema = create_app().openapi()
    if server_url:
        schema = {**schema, "servers": [{"url": server_url}]}

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(schema, indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote OpenAPI document (%d paths) to %s", len(schema["paths"]), output)
    return schema


def main() -> None:
    parser = argparse.ArgumentParser(description="Export the OpenAPI document")
    parser.add_argument(
        "--output", type=Path, default=DEFAULT_OUTPUT,
        help=f"Destination JSON file (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--server-url", default=None,
        help="Base URL to list under 'servers', e.g. http://localhost:3000",
    )
    args = parser.parse_args()

    configure_logging()
    export_openapi(args.output, server_url=args.server_url)


if __name__ == "__main__":
    main()
