# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Per-column width estimation and cell rendering.

A `MeasureColumn` accumulates a histogram of field lengths while the input is being measured.
`MeasureColumn.calculate_size` converts the histogram into an immutable `Column`,
which renders cells at the chosen width.
'''

from bisect import bisect_left
from dataclasses import dataclass
from typing import Sequence, TextIO


ellipsis = '…'


@dataclass
class ExtraInfo:
  'The shortest and longest samples seen in a column, for the column report.'
  min_value:str
  max_value:str

  def update(self, value:str) -> None:
    # Ties keep the earlier sample.
    if len(value) < len(self.min_value): self.min_value = value
    if len(value) > len(self.max_value): self.max_value = value


class MeasureColumn:

  def __init__(self, collect_info:bool=False, *, excluded:bool=False, truncated:bool=False) -> None:
    self.lengths:list[int] = [] # Distinct sample lengths, ascending.
    self.counts:list[int] = [] # Occurrences of each length in `lengths`.
    self.excluded = excluded
    self.truncated = truncated
    self.collect_info = collect_info
    self.info:ExtraInfo|None = None

  def __repr__(self) -> str:
    hist = ', '.join(f'{l}:{c}' for l, c in zip(self.lengths, self.counts))
    return f'{type(self).__name__}({{{hist}}}, excluded={self.excluded}, truncated={self.truncated})'

  def add_sample(self, value:str) -> None:
    length = len(value)
    lengths = self.lengths
    i = bisect_left(lengths, length)
    if i < len(lengths) and lengths[i] == length:
      self.counts[i] += 1
    else:
      lengths.insert(i, length)
      self.counts.insert(i, 1)
    if self.collect_info:
      if self.info is None: self.info = ExtraInfo(value, value)
      else: self.info.update(value)

  def calculate_size(self, ratio:float) -> 'Column':
    'Choose a width for the samples seen so far. Does not modify the histogram.'
    return Column(size=calc_size(self.lengths, self.counts, ratio), excluded=self.excluded, truncated=self.truncated,
      info=None if self.info is None else ExtraInfo(self.info.min_value, self.info.max_value))


def calc_size(lengths:Sequence[int], counts:Sequence[int], ratio:float) -> int:
  '''
  Choose a column width from a length histogram.
  `lengths` must be ascending and unique; `counts` holds the number of samples of each length.

  Each candidate width `l` from the shortest to the longest length is scored as:
  `ratio * (1 + waste) + (1 + overflow)**2 * spread`,
  where `waste` is the expected padding for samples shorter than `l`,
  `overflow` is the expected excess of samples longer than `l`,
  and `spread` penalizes overflow more heavily in columns whose lengths vary little.
  Higher ratios favor narrower columns.
  The scan stops at the first candidate that does not improve on its predecessor; it is not a global search.
  A ratio of zero always yields the longest length.
  '''
  if not lengths: return 0
  min_len = lengths[0]
  max_len = lengths[-1]
  if ratio == 0: return max_len

  n = sum(counts)
  probs = [(s, count / n) for s, count in zip(lengths, counts)]
  spread = (0.7 + 20 / (1 + max_len - min_len)) ** 2

  best_score = float('inf')
  best_size = max_len
  for l in range(min_len, max_len + 1):
    waste = sum(p * (l - s) for s, p in probs if s < l)
    overflow = sum(p * (s - l) for s, p in probs if s > l)
    score = ratio * (1 + waste) + (1 + overflow) ** 2 * spread
    if score < best_score:
      best_score = score
      best_size = l
    else:
      break
  return best_size


@dataclass(frozen=True)
class Column:
  'A finalized column: its width and render flags.'
  size:int
  excluded:bool = False
  truncated:bool = False
  info:ExtraInfo|None = None

  def print_cell(self, out:TextIO, cell:str, overflow:int, is_last:bool) -> int:
    '''
    Write `cell` to `out` and return the overflow carried to the next cell of the row.
    `overflow` is the number of characters by which the preceding cells overran their widths;
    this cell gives up that much of its own width to bring the row back into alignment.
    The last cell of a row is written as is, without padding or truncation.
    '''
    if is_last:
      out.write(cell)
      return 0

    size = self.size
    out_width = size - min(overflow, size)
    length = len(cell)

    if self.truncated and length > out_width:
      if out_width == 0:
        out.write(ellipsis)
        return 1
      out.write(cell[:out_width-1])
      out.write(ellipsis)
      return 0

    out.write(cell.ljust(out_width))
    if length < size: return max(0, overflow - (size - length))
    return overflow + (length - size)

  def write_info(self, out:TextIO) -> None:
    'Write the indented report lines for this column.'
    out.write(f'  size: {self.size}\n')
    out.write(f'  excluded: {str(self.excluded).lower()}\n')
    out.write(f'  truncated: {str(self.truncated).lower()}\n')
    if self.info is not None:
      out.write(f'  shortest: {self.info.min_value!r} ({len(self.info.min_value)})\n')
      out.write(f'  longest: {self.info.max_value!r} ({len(self.info.max_value)})\n')
