"""Command line entry point: find title references in a text file."""

from __future__ import annotations

import json
import os
import sys
import time

from .processor import TextProcessor
from .utils import write_file

_PROGRAM = "refbreaker"


def _usage_text(program: str) -> str:
    """Return the usage message for ``program``."""
    return "\n".join(
        [
            f"Usage: {program} <wiki_titles_file> <input_text_file> "
            "<output_json_file> [--sequential]",
            "Options:",
            "  --sequential    Run in sequential mode (default is parallel)",
        ]
    )


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not 3 <= len(args) <= 4:
        print(_usage_text(_PROGRAM), file=sys.stderr)
        return 1

    titles_file, input_file, output_file = args[:3]
    use_parallel = not (len(args) == 4 and args[3] == "--sequential")

    try:
        print(f"Using up to {os.cpu_count() or 1} threads for text processing.")
        print("Initializing text processor...")
        processor = TextProcessor()

        print(f"Loading Wikipedia titles from {titles_file}...")
        started = time.perf_counter()
        processor.load_wiki_titles(titles_file)
        elapsed = (time.perf_counter() - started) * 1000
        print(f"Wiki titles loaded successfully in {elapsed} ms.")

        print(f"Processing text file: {input_file}...")
        started = time.perf_counter()
        result = processor.process_file(input_file, use_parallel)
        elapsed = (time.perf_counter() - started) * 1000
        print(f"Text processing complete in {elapsed} ms.")

        print(f"Writing results to {output_file}...")
        write_file(
            output_file,
            json.dumps(result, indent=2, sort_keys=True, ensure_ascii=False),
        )

        if "references" in result:
            print(f"Found {len(result['references'])} references in the text.")
        print("Processing complete.")
        return 0
    except Exception as exc:  # report any failure as the command's error
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())