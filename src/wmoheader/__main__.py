"""wmoheader - print the WMO abbreviated headers found in bulletin files.

Usage::

    python -m wmoheader [FILE ...]

Reads standard input when no file is given, or for a FILE of ``-``, and
writes one JSON document per header line found.
"""

import sys
from collections.abc import Iterator
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger
from rich.console import Console

from wmoheader.models import Config
from wmoheader.scanner import iter_headers
from wmoheader.utils import LoggingConfig

USAGE = "usage: python -m wmoheader [-h] [FILE ...]"


def _read_sources(paths: list[str]) -> Iterator[tuple[str, list[str] | None]]:
    """Yield (name, lines) per source; lines is None when the file is unreadable."""
    if not paths:
        yield "<stdin>", sys.stdin.read().splitlines()
        return

    for path in paths:
        if path == "-":
            yield "<stdin>", sys.stdin.read().splitlines()
            continue
        try:
            text = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error("Cannot read bulletin file", path=path, error=str(e))
            yield path, None
            continue
        yield path, text.splitlines()


def main(argv: list[str] | None = None) -> int:
    """Scan the given files (or stdin) and print each header as JSON.

    Returns:
        0 on success, 1 if any file could not be read, 2 on an unknown option.

    """
    paths = sys.argv[1:] if argv is None else argv
    console = Console(highlight=False, soft_wrap=True, emoji=False)

    options = [p for p in paths if p.startswith("-") and p != "-"]
    if options:
        if options[0] in ("-h", "--help"):
            console.print(USAGE, markup=False)
            return 0
        Console(stderr=True, highlight=False).print(
            f"wmoheader: unknown option {options[0]}\n{USAGE}",
            markup=False,
        )
        return 2

    load_dotenv(override=True)
    config = Config.from_env()
    LoggingConfig.configure(config.log_level, config.log_file)

    status = 0

    for name, lines in _read_sources(paths):
        if lines is None:
            status = 1
            continue

        count = 0
        for header in iter_headers(lines):
            if header.model is None:
                continue
            console.print(
                header.model.model_dump_json(by_alias=config.json_aliases),
                markup=False,
            )
            count += 1

        logger.info("Scanned bulletin source", source=name, headers=count)

    return status


if __name__ == "__main__":
    sys.exit(main())
