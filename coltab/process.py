# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The coltab pipeline.

Processing runs through three states:
* `Measuring`: rows are tokenized and measured, and either buffered in a backlog or, in online mode, printed immediately.
* `PrintBacklog`: column sizes are finalized and the backlog is printed (or the column report, instead of any rows).
* `ProcessInput`: the remaining input is printed as it arrives, with the final sizes.
'''

from dataclasses import dataclass, field
from io import StringIO
from typing import Iterable, Iterator, TextIO

from pithy.io import errL, writeL

from .column import Column, MeasureColumn
from .iterable import iter_first_last
from .ranges import Ranges
from .row import Row, RowParser


class OptionsError(ValueError): pass


@dataclass
class Options:
  truncate:Ranges|None = None # Columns to truncate; None truncates nothing.
  ratio:float = 1.0 # Compression ratio; 0 fits every value.
  estimate_lines:int = 1000 # Number of lines measured before sizes are fixed; 0 measures the whole input.
  include_cols:Ranges|None = None # Columns to print; None prints all.
  exclude_cols:Ranges = field(default_factory=Ranges) # Columns never printed; wins over `include_cols`.
  delims:str = ' \t'
  out_delim:str = '  '
  strict_delim:bool = False
  online:bool = False
  print_info:bool = False
  dbg:bool = False

  def validate(self) -> None:
    if not self.ratio >= 0: raise OptionsError(f'compression ratio must be a non-negative number: {self.ratio}')
    if self.estimate_lines < 0: raise OptionsError(f'estimate count must not be negative: {self.estimate_lines}')
    if not self.delims: raise OptionsError('field delimiter set must not be empty')
    if self.online and self.print_info: raise OptionsError('online mode cannot be combined with the column report')


@dataclass
class Measuring:
  count:int # 1-based number of the line about to be measured.
  backlog:list[Row]

@dataclass
class PrintBacklog:
  backlog:list[Row]

@dataclass
class ProcessInput:
  pass

State = Measuring|PrintBacklog|ProcessInput


class Processor:
  '''
  Drives the pipeline state machine over `lines`, writing to `out`.
  Each state has one transition method, which returns the next state, or None when processing is complete.
  '''

  def __init__(self, lines:Iterable[str], out:TextIO, opts:Options) -> None:
    opts.validate()
    self.lines = iter(lines)
    self.out = out
    self.opts = opts
    self.parser = RowParser(opts.delims, strict=opts.strict_delim)
    self.row = Row() # Reused for every line that is not buffered.
    self.measure_columns:list[MeasureColumn] = []
    self.columns:list[Column] = []
    self.line_count = 0

  def run(self) -> None:
    state:State|None = Measuring(count=1, backlog=[])
    while state is not None:
      match state:
        case Measuring(): state = self.measure(state)
        case PrintBacklog(): state = self.print_backlog(state)
        case ProcessInput(): state = self.process_input(state)

  def next_line(self) -> str|None:
    try: line = next(self.lines)
    except StopIteration: return None
    self.line_count += 1
    return strip_newline(line)

  def measure(self, state:Measuring) -> State:
    opts = self.opts
    line = self.next_line()
    if line is None:
      if opts.dbg: errL(f'coltab: input ended while measuring, after {self.line_count} lines.')
      return PrintBacklog(state.backlog)

    row = self.row
    self.parser.parse_into(row, line)
    update_columns(self.measure_columns, row, include_cols=opts.include_cols, exclude_cols=opts.exclude_cols,
      truncate_cols=opts.truncate, collect_info=opts.print_info)

    if opts.online:
      self.columns = [col.calculate_size(opts.ratio) for col in self.measure_columns]
      print_row(self.out, self.columns, row, opts.out_delim)
    else:
      state.backlog.append(row.copy())

    if opts.estimate_lines == 0 or state.count < opts.estimate_lines:
      return Measuring(count=state.count + 1, backlog=state.backlog)
    if opts.dbg: errL(f'coltab: measured {state.count} lines.')
    return PrintBacklog(state.backlog)

  def print_backlog(self, state:PrintBacklog) -> State|None:
    opts = self.opts
    self.columns = columns = [col.calculate_size(opts.ratio) for col in self.measure_columns]
    self.measure_columns.clear()
    if opts.dbg: errL(f'coltab: {len(columns)} columns; sizes: {[col.size for col in columns]}.')

    if opts.print_info:
      print_column_info(self.out, columns)
      return None

    for row in state.backlog:
      print_row(self.out, columns, row, opts.out_delim)
    if opts.dbg: errL(f'coltab: printed backlog of {len(state.backlog)} rows; streaming.')
    return ProcessInput()

  def process_input(self, state:ProcessInput) -> State|None:
    line = self.next_line()
    if line is None:
      if self.opts.dbg: errL(f'coltab: done after {self.line_count} lines.')
      return None
    self.parser.parse_into(self.row, line)
    print_row(self.out, self.columns, self.row, self.opts.out_delim)
    return state


def process(lines:Iterable[str], out:TextIO, opts:Options) -> None:
  'Align `lines` into columns and write them to `out`.'
  Processor(lines, out, opts).run()


def render_text(text:str, opts:Options|None=None) -> str:
  'Align the lines of `text` and return the result.'
  out = StringIO()
  process(StringIO(text), out, opts or Options())
  return out.getvalue()


def strip_newline(line:str) -> str:
  if line.endswith('\n'):
    line = line[:-1]
    if line.endswith('\r'): line = line[:-1]
  return line


def update_columns(columns:list[MeasureColumn], row:Row, include_cols:Ranges|None, exclude_cols:Ranges,
 truncate_cols:Ranges|None, collect_info:bool) -> None:
  '''
  Add the fields of `row` to the measured columns, creating columns as needed.
  The include, exclude and truncate selectors are evaluated only once, when a column is created.
  '''
  known = min(len(columns), len(row))
  for i in range(known):
    columns[i].add_sample(row[i])
  for i in range(len(columns), len(row)):
    col_num = i + 1
    included = include_cols is None or include_cols.any_contains(col_num)
    excluded = exclude_cols.any_contains(col_num)
    truncated = truncate_cols is not None and truncate_cols.any_contains(col_num)
    col = MeasureColumn(collect_info, excluded=(not included or excluded), truncated=truncated)
    col.add_sample(row[i])
    columns.append(col)


def iter_cells(columns:list[Column], row:Row) -> Iterator[tuple[str,Column]]:
  'Yield the cells of `row` that are printed, with their columns. Fields beyond the known columns are dropped.'
  for cell, col in zip(row, columns):
    if not col.excluded: yield (cell, col)


def print_row(out:TextIO, columns:list[Column], row:Row, out_delim:str='  ') -> None:
  overflow = 0
  for (cell, col), is_first, is_last in iter_first_last(iter_cells(columns, row)):
    if not is_first: out.write(out_delim)
    overflow = col.print_cell(out, cell, overflow, is_last)
  out.write('\n')


def print_column_info(out:TextIO, columns:list[Column]) -> None:
  for i, col in enumerate(columns, 1):
    writeL(out, f'Column {i}')
    col.write_info(out)
    writeL(out)
