# fuzzypatch

Parse edit instructions written as SEARCH/REPLACE blocks and apply them to a
document. A block's search text does not need to match exactly. The package
looks for it near a line hint and accepts the nearest match whose similarity,
based on Levenshtein distance, meets a threshold you choose.

## Installation

```
pip install fuzzypatch
```

## Block format

```
<<<<<<< SEARCH line:2
bar
baz
=======
qux
quux
>>>>>>> REPLACE
```

- `line:` gives the 1-based line where the search should start. It must be
  an integer.
- Several blocks can follow one another. Only blank lines may appear before
  a block.

## Usage

```python
from fuzzypatch.parse import parse
from fuzzypatch.apply import search, apply

source = "foo\nbar\nbaz\n"
patch = "<<<<<<< SEARCH line:2\nbar\nbaz\n=======\nqux\nquux\n>>>>>>> REPLACE\n"

edits = []
for diff in parse(patch):
    edit = search(source, diff, threshold=0.9)
    if edit is not None:
        edits.append(edit)

print(apply(source, edits))   # "foo\nqux\nquux\n"
```

### `fuzzypatch.parse`

- `parse(text)` returns a list of `Diff` objects. It raises `ParseError`, a
  `ValueError`, in these cases:
  - a block is malformed;
  - a marker is missing;
  - the line number is not an integer.
- `tokenize(text)` yields one `Token` (`type`, `line`, `text`) per input
  line, followed by a final `TokenType.EOF` token.
  - Line numbers start at 0, and each token's text keeps its line ending.
  - The other token types are `START_SEARCH`, `TEXT_SEPARATOR`,
    `END_REPLACE` and `TEXT`.

### `fuzzypatch.apply`

- `Diff(line, search, replace)` describes one replacement.
- `Edit(start, end, text)` replaces the characters in `[start, end)` with
  `text`.
- `search(source, diff, threshold)` looks for a window of source lines that
  matches `diff.search`.
  - The window has as many lines as `diff.search`.
  - It starts at the hinted line, clamped to the document. It then tries the
    window above and then the one below, moving further out each time.
  - It returns the first `Edit` whose window reaches `threshold` similarity.
  - It returns `None` when nothing matches. It also returns `None` when the
    source or the search text is empty, or when the search text has more
    lines than the source.
- `apply(source, edits)` applies all edits in one pass, back to front. It
  raises `EditError`, a `ValueError`, if an edit's range is invalid or two
  edits overlap.
- `similarity(a, b)` returns `1 - levenshtein(a, b) / max(len(a), len(b))`.
  Two empty strings give 1.0.
- `levenshtein(a, b)` returns the edit distance between two strings.

## What it does not do

This is a library only:

- It has no command-line tool.
- It does not read or write files; you pass strings in and get strings back.
- It does not decide what happens to blocks that `search` cannot place. That
  choice is left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```