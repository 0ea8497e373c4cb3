from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .checker import CheckClient
from .runner import BenchmarkRunner

LOGGER = logging.getLogger("typingbench")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="typingbench",
        description="Simulate users typing into a text-checking API and report check latencies",
    )
    parser.add_argument(
        "input", help="File with one document per line, each typed as a whole"
    )
    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
    )


def read_documents(path: Path) -> List[str]:
    """One document per line; only newlines separate documents."""
    text = path.read_text(encoding="utf-8")
    docs = text.split("\n")
    if docs and docs[-1] == "":
        docs.pop()
    return docs


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(os.environ.get("TYPINGBENCH_LOG_LEVEL", "INFO"))

    try:
        docs = read_documents(Path(args.input))
    except OSError as exc:
        LOGGER.error("Cannot read input %s: %s", args.input, exc)
        return 1

    with CheckClient() as client:
        try:
            runner = BenchmarkRunner(client)
        except ValueError as exc:
            LOGGER.error("Invalid typing model: %s", exc)
            return 1

        LOGGER.info("Using API at %s", client.config.api_url)
        results = runner.run(docs)
    print(runner.report(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
