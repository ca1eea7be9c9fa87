"""List files and run a reference search against the Penpoint API.

Usage:
    PENPOINT_API_KEY=... python scripts/basic_usage.py [--file-id 123 --prompt "CMake integration"]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from typing import Optional

from penpoint import PenpointClient, PenpointError

logger = logging.getLogger("penpoint.example")
logging.basicConfig(level=logging.INFO)


async def run(file_id: Optional[int], prompt: str, tier: str) -> None:
    async with PenpointClient.from_env() as client:
        files = await client.files.list(limit=5)
        logger.info("Found %d files", len(files.data))
        for file in files.data:
            logger.info("  %s (id=%s) summary=%s", file.name, file.id, file.summary or "-")

        if file_id is None:
            return

        search = getattr(client.discrete_references, tier)
        result = await search(file_id, prompt, False)
        for part in result.refs.parts[:3]:
            logger.info("  page=%s score=%.3f %s", part.page_number, part.hybrid_score, part.segment[:100])


def main() -> None:
    parser = argparse.ArgumentParser(description="List files and search references on Penpoint")
    parser.add_argument("--file-id", type=int, default=None)
    parser.add_argument("--prompt", default="CMake integration")
    parser.add_argument("--tier", choices=("basic", "standard", "advanced"), default="basic")
    args = parser.parse_args()

    if not os.environ.get("PENPOINT_API_KEY"):
        raise SystemExit("Please set the PENPOINT_API_KEY environment variable")

    try:
        asyncio.run(run(args.file_id, args.prompt, args.tier))
    except PenpointError as exc:
        logger.error("Request failed kind=%s: %s", exc.kind.value, exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
