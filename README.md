# refbreaker

`refbreaker` scans a text file for occurrences of a list of known titles
(for example, article titles). It writes the full text and every match it
found to a JSON file.

## Installation

```
pip install .
```

## Command line

```
refbreaker <wiki_titles_file> <input_text_file> <output_json_file> [--sequential]
```

- `wiki_titles_file` lists one title per line. Blank lines are skipped.
  Spaces, tabs, carriage returns and newlines are removed from both ends of
  each line. Each title gets an index, counted from 0 in the order the
  titles appear in the file. If a title appears twice, it keeps the index of
  its last appearance.
- `input_text_file` is the text to scan. It is read as UTF-8.
- `output_json_file` receives the result. The JSON is indented by two spaces
  and its keys are sorted.
- `--sequential` processes the blocks one after another. Without it, the
  blocks are processed on a thread pool. Both modes give the same result.

While it runs, the command prints its progress and timings to standard
output.

### How the text is scanned

The text is split into blocks of 1024 characters. A block that is not the
last one may end earlier. This happens when a sentence end (`.`, `!` or
`?`) lies within the last 100 characters before the cut point. The block
then ends just after that character and takes in any whitespace that
follows it. Every position in each block is checked against every title.
The matches from all blocks are then merged and sorted by start position.
Overlapping matches are all reported. A match that would cross the boundary
between two blocks is not reported.

### Output

For the text `Paris is in France.` and the titles `Paris` and `France`, the
output is:

```json
{
  "references": [
    {
      "end": 5,
      "start": 0,
      "title": "Paris",
      "titleIndex": 0
    },
    {
      "end": 18,
      "start": 12,
      "title": "France",
      "titleIndex": 1
    }
  ],
  "text": "Paris is in France."
}
```

- `start` and `end` are offsets into the whole text, counted in characters.
  `end` is exclusive.
- `titleIndex` is the title's index from the titles file.

### Errors

The command prints a usage message and exits with status 1 when it is given
fewer than three or more than four arguments. If any step fails, it prints
`Error: ...` to standard error and exits with status 1. This includes a file
that cannot be read or written.

## Library use

```python
from refbreaker.processor import TextProcessor

processor = TextProcessor()
processor.load_wiki_titles("titles.txt")
result = processor.process_file("article.txt", use_parallel=False)
print(len(result["references"]))
```

`TextProcessor` has the following methods:

- `load_wiki_titles(path)` adds titles to `processor.title_indices`. This is
  a dict that maps each title to its index. If the file cannot be opened,
  the method raises `OSError`.
- `process_file(path, use_parallel=True)` calls either
  `process_file_parallel(path)` or `process_file_sequential(path)`. The
  result is a dict with the keys `"text"` and `"references"`.
- `split_into_blocks(text, block_size=1024)` returns the list of blocks. If
  `block_size` is not positive, it raises `ValueError`.
- `process_block(block, block_offset)` returns a `ProcessedBlock`. This has
  a `text` and a list of `Reference` objects, each with the fields `start`,
  `end`, `title_index` and `title`. The positions are shifted by
  `block_offset`.
- `blocks_to_json(blocks)` joins the blocks into the result dict.

Progress messages are sent to the `refbreaker.processor` logger at `DEBUG`
level.

The module `refbreaker.utils` has these helpers:

- `read_file(filename)` and `write_file(filename, content)` work with UTF-8
  text. If the file cannot be opened, they raise `OSError`.
- `split_string(text, delimiter)` splits the text and drops empty pieces.
- `trim(text)` strips spaces, tabs, carriage returns and newlines from both
  ends.

## Running the tests

```
pip install ".[test]"
pytest
```