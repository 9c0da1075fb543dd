# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Column selectors: `N`, `N-`, `N-M` and `-M`, with columns numbered from 1.
'''

import re
from dataclasses import dataclass
from typing import Iterable, Iterator


class RangeError(ValueError):
  'Base class for column selector errors.'


class RangeParseError(RangeError):
  def __init__(self, text:str) -> None:
    self.text = text
    super().__init__(f'could not parse {text!r} as a range')


class InvalidDecreasingRange(RangeError):
  def __init__(self, text:str) -> None:
    self.text = text
    super().__init__(f'invalid decreasing range: {text}')


class ColumnsStartAtOne(RangeError):
  def __init__(self) -> None:
    super().__init__('columns are numbered starting from 1')


@dataclass(frozen=True)
class From:
  'All columns from `start` onwards.'
  start:int

  def __post_init__(self) -> None:
    if self.start < 1: raise ColumnsStartAtOne()

  def __str__(self) -> str: return f'{self.start}-'

  def contains(self, n:int) -> bool:
    return self.start <= n


@dataclass(frozen=True)
class To:
  'All columns up to and including `end`.'
  end:int

  def __post_init__(self) -> None:
    if self.end < 1: raise ColumnsStartAtOne()

  def __str__(self) -> str: return f'-{self.end}'

  def contains(self, n:int) -> bool:
    return n <= self.end


@dataclass(frozen=True)
class Between:
  'Columns `start` through `end`, inclusive.'
  start:int
  end:int

  def __post_init__(self) -> None:
    if self.start < 1: raise ColumnsStartAtOne()
    if self.end < self.start: raise InvalidDecreasingRange(f'{self.start}-{self.end}')

  def __str__(self) -> str:
    return str(self.start) if self.start == self.end else f'{self.start}-{self.end}'

  def contains(self, n:int) -> bool:
    return self.start <= n <= self.end


ColRange = From|To|Between


@dataclass(frozen=True)
class Ranges:
  '''
  A set of column selectors. An empty `Ranges` contains no columns.
  '''
  ranges:tuple[ColRange,...] = ()

  @classmethod
  def all(cls) -> 'Ranges':
    return cls((From(1),))

  def __iter__(self) -> Iterator[ColRange]:
    return iter(self.ranges)

  def __len__(self) -> int:
    return len(self.ranges)

  def __str__(self) -> str:
    return ','.join(str(r) for r in self.ranges)

  def __add__(self, other:'Ranges') -> 'Ranges':
    return Ranges(self.ranges + other.ranges)

  def any_contains(self, n:int) -> bool:
    return any(r.contains(n) for r in self.ranges)


def parse_range(text:str) -> ColRange:
  '''
  Parse a single selector.
  Syntax errors raise `RangeParseError`; a zero column raises `ColumnsStartAtOne`;
  `N-M` with `M < N` raises `InvalidDecreasingRange`.
  '''
  m = _range_re.fullmatch(text)
  if m is None: raise RangeParseError(text)
  start_str, dash, end_str = m['start'], m['dash'], m['end']
  if start_str is None:
    if end_str is None: raise RangeParseError(text) # Bare '-'.
    return To(int(end_str))
  start = int(start_str)
  if not dash: return Between(start, start)
  if end_str is None: return From(start)
  end = int(end_str)
  if start == 0: raise ColumnsStartAtOne()
  if end < start: raise InvalidDecreasingRange(text)
  return Between(start, end)


def parse_ranges(text:str) -> Ranges:
  'Parse a comma separated list of selectors, e.g. "1,3-4,7-".'
  return Ranges(tuple(parse_range(part) for part in text.split(',')))


def join_ranges(ranges:Iterable[Ranges]) -> Ranges:
  res = Ranges()
  for r in ranges: res += r
  return res


_range_re = re.compile(r'(?P<start>[0-9]+)?(?P<dash>-)?(?P<end>[0-9]+)?')
