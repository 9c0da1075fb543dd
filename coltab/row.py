# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Split input lines into fields.

A `Row` owns one line and a list of (start, end) spans into it; fields are sliced from the line on demand.
`RowParser` fills a row with a small character class state machine that understands bracket and quote groups.
'''

from enum import Enum
from typing import Iterator


class Row:
  '''
  One tokenized line: the line text and the half-open spans of its fields.
  Spans are in increasing order and do not overlap.
  '''

  __slots__ = ('line', 'spans')

  def __init__(self, line:str='', spans:list[tuple[int,int]]|None=None) -> None:
    self.line = line
    self.spans:list[tuple[int,int]] = [] if spans is None else spans

  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.line!r}, {self.spans!r})'

  def __len__(self) -> int:
    return len(self.spans)

  def __getitem__(self, index:int) -> str:
    start, end = self.spans[index]
    return self.line[start:end]

  def __iter__(self) -> Iterator[str]:
    line = self.line
    return (line[start:end] for start, end in self.spans)

  def copy(self) -> 'Row':
    return Row(self.line, list(self.spans))


class ParseState(Enum):
  Whitespace = 0
  NonWhitespace = 1
  InsideGroup = 2


# Group openers and their closers. Groups are only recognized in non-strict mode.
group_closers = {
  '(': ')',
  '[': ']',
  '"': '"',
}


class RowParser:
  '''
  `delims` is the set of field delimiter characters.
  In strict mode every delimiter separates two fields, so empty fields are preserved and groups are not recognized;
  otherwise runs of delimiters collapse and leading or trailing delimiters are ignored.
  '''

  def __init__(self, delims:str=' \t', strict:bool=False) -> None:
    self.delims = frozenset(delims)
    self.strict = strict

  def __repr__(self) -> str:
    return f'{type(self).__name__}({"".join(sorted(self.delims))!r}, strict={self.strict})'

  def parse(self, line:str) -> Row:
    row = Row()
    self.parse_into(row, line)
    return row

  def parse_into(self, row:Row, line:str) -> None:
    'Tokenize `line` into `row`, replacing its previous contents.'
    Whitespace = ParseState.Whitespace
    NonWhitespace = ParseState.NonWhitespace
    InsideGroup = ParseState.InsideGroup
    delims = self.delims
    strict = self.strict

    row.line = line
    spans = row.spans
    spans.clear()

    state = Whitespace
    start = 0
    closer = ''
    for i, c in enumerate(line):
      if state is Whitespace:
        if not strict and c in group_closers:
          start = i
          closer = group_closers[c]
          state = InsideGroup
        elif c not in delims:
          start = i
          state = NonWhitespace
        elif strict:
          spans.append((i, i))
      elif state is NonWhitespace:
        if c in delims:
          spans.append((start, i))
          state = Whitespace
      elif c == closer: # InsideGroup.
        spans.append((start, i+1))
        state = Whitespace

    # An unterminated group is dropped.
    if state is NonWhitespace:
      spans.append((start, len(line)))
    elif strict and state is Whitespace:
      spans.append((len(line), len(line)))
