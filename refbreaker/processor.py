"""Find occurrences of known titles in a text, block by block."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from itertools import accumulate
from typing import Any, Iterable

from .utils import read_file, trim

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_SIZE = 1024
_LOOKBACK_LIMIT = 100
_SENTENCE_ENDS = frozenset(".!?")
_SPACE_CHARS = frozenset(" \t\n\v\f\r")


@dataclass
class Reference:
    """One occurrence of a title, as a half-open span of the whole text."""

    start: int
    end: int
    title_index: int
    title: str

    def to_json(self) -> dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "titleIndex": self.title_index,
            "title": self.title,
        }


@dataclass
class ProcessedBlock:
    """A block of text together with the references found in it."""

    text: str
    references: list[Reference] = field(default_factory=list)


class TextProcessor:
    """Matches a set of titles against the contents of text files."""

    def __init__(self) -> None:
        self.title_indices: dict[str, int] = {}

    def load_wiki_titles(self, wiki_titles_file: str) -> None:
        """Load one title per line; blank lines are skipped."""
        try:
            handle = open(wiki_titles_file, encoding="utf-8", newline="")
        except OSError as exc:
            raise OSError(
                f"Could not open wiki titles file: {wiki_titles_file}"
            ) from exc

        index = 0
        with handle:
            for line in handle:
                title = trim(line)
                if not title:
                    continue
                self.title_indices[title] = index
                index += 1
                if index % 10 == 0:
                    logger.debug("Inserted %d titles...", index)
        logger.debug("Inserted all %d titles.", index)

    def process_file(self, input_file: str, use_parallel: bool = True) -> dict[str, Any]:
        """Process ``input_file`` in parallel or sequentially."""
        if use_parallel:
            logger.debug("Using parallel processing mode...")
            return self.process_file_parallel(input_file)
        logger.debug("Using sequential processing mode...")
        return self.process_file_sequential(input_file)

    def process_file_parallel(self, input_file: str) -> dict[str, Any]:
        """Process the blocks of ``input_file`` on a thread pool."""
        blocks, offsets = self._read_blocks(input_file)
        with ThreadPoolExecutor() as pool:
            processed = list(pool.map(self.process_block, blocks, offsets))
        return self.blocks_to_json(processed)

    def process_file_sequential(self, input_file: str) -> dict[str, Any]:
        """Process the blocks of ``input_file`` one after another."""
        blocks, offsets = self._read_blocks(input_file)
        processed = [
            self.process_block(block, offset) for block, offset in zip(blocks, offsets)
        ]
        return self.blocks_to_json(processed)

    def _read_blocks(self, input_file: str) -> tuple[list[str], list[int]]:
        content = read_file(input_file)
        logger.debug("File content read, size: %d characters.", len(content))
        blocks = self.split_into_blocks(content)
        logger.debug("Split into %d blocks.", len(blocks))
        offsets = [0, *accumulate(len(block) for block in blocks)][:-1]
        return blocks, offsets

    def split_into_blocks(
        self, text: str, block_size: int = DEFAULT_BLOCK_SIZE
    ) -> list[str]:
        """Cut ``text`` into pieces of about ``block_size`` characters.

        A cut is moved back to just after a sentence end found near the
        nominal cut point, taking any following whitespace along.
        """
        if block_size <= 0:
            raise ValueError("block_size must be positive")

        blocks: list[str] = []
        length = len(text)
        position = 0
        while position < length:
            size = min(block_size, length - position)
            split_pos = position + size
            if split_pos < length:
                lookback = min(size, _LOOKBACK_LIMIT)
                low = max(position + 1, split_pos - lookback)
                sentence_end = next(
                    (
                        pos
                        for pos in range(split_pos, low - 1, -1)
                        if text[pos] in _SENTENCE_ENDS
                    ),
                    None,
                )
                if sentence_end is not None:
                    split_pos = sentence_end + 1
                    while split_pos < length and text[split_pos] in _SPACE_CHARS:
                        split_pos += 1
                    size = split_pos - position
            blocks.append(text[position : position + size])
            position += size
        return blocks

    def process_block(self, block: str, block_offset: int) -> ProcessedBlock:
        """Find every title occurrence in ``block``; spans are global."""
        references = [
            Reference(
                start=block_offset + pos,
                end=block_offset + pos + len(title),
                title_index=title_index,
                title=title,
            )
            for pos in range(len(block))
            for title, title_index in self.title_indices.items()
            if block.startswith(title, pos)
        ]
        logger.debug("Found %d references in block.", len(references))
        return ProcessedBlock(text=block, references=references)

    def blocks_to_json(self, blocks: Iterable[ProcessedBlock]) -> dict[str, Any]:
        """Join blocks into one text and a list of references sorted by start."""
        blocks = list(blocks)
        full_text = "".join(block.text for block in blocks)
        references = sorted(
            (ref for block in blocks for ref in block.references),
            key=lambda ref: ref.start,
        )
        return {
            "text": full_text,
            "references": [ref.to_json() for ref in references],
        }