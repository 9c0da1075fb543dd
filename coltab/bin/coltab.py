# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Align loosely delimited tabular text, such as shell command output, into columns.
'''

from argparse import ArgumentParser, ArgumentTypeError, Namespace
from os import devnull, dup2, open as os_open, O_WRONLY
from sys import stdin, stdout
from typing import Sequence

from ..__about__ import version_str
from ..process import Options, OptionsError, process
from ..ranges import join_ranges, parse_ranges, RangeError, Ranges


def main(args:Sequence[str]|None=None) -> None:
  parser = build_arg_parser()
  ns = parser.parse_args(args)
  try: opts = options_from_args(ns)
  except OptionsError as e: parser.error(str(e))

  # Only \n ends a line; a lone \r is part of its line whether the input is a file or stdin.
  try:
    if ns.path == '-':
      stdin.reconfigure(errors='replace', newline='\n')
      f = stdin
    else:
      f = open(ns.path, errors='replace', newline='\n')
    with f:
      process(f, stdout, opts)
      stdout.flush()
  except BrokenPipeError:
    # The reader went away. Point stdout at devnull so that the final flush at exit does not fail again.
    dup2(os_open(devnull, O_WRONLY), stdout.fileno())
  except OSError as e:
    exit(f'coltab: error: {e}')


def build_arg_parser() -> ArgumentParser:
  parser = ArgumentParser(prog='coltab', description='Align whitespace or otherwise delimited text into columns.')
  parser.add_argument('path', nargs='?', default='-', help='Input file path, or - for stdin. (default: -)')

  parser.add_argument('-truncate', '-t', dest='truncate', nargs='?', const='1-', type=ranges_arg, action='append',
    metavar='RANGES', help='Truncate data that does not fit in the selected columns (default: all columns). '
    'When RANGES is omitted, give the input path before this flag.')
  parser.add_argument('-compress-cols', '-c', dest='ratio', type=ratio_arg, default=1.0, metavar='RATIO',
    help='Compress columns so that more data fits on the screen; 0 disables compression. (default: 1.0)')
  parser.add_argument('-estimate-count', '-n', dest='estimate_lines', type=count_arg, default=1000, metavar='N',
    help='Estimate column sizes from the first N lines; 0 uses the whole input. (default: 1000)')
  parser.add_argument('-include-cols', '-i', dest='include_cols', type=ranges_arg, action='append', metavar='RANGES',
    help='Print only the selected columns, e.g. "1,3-5,7-".')
  parser.add_argument('-exclude-cols', '-x', dest='exclude_cols', type=ranges_arg, action='append', metavar='RANGES',
    help='Do not print the selected columns; takes precedence over -include-cols.')
  parser.add_argument('-delim', '-d', dest='delims', default=' \t', metavar='CHARS',
    help='Characters that delimit fields. (default: space and tab)')
  parser.add_argument('-output-delim', '-o', dest='out_delim', default='  ', metavar='STR',
    help='String printed between columns. (default: two spaces)')
  parser.add_argument('-strict-delim', '-s', dest='strict_delim', action='store_true',
    help='Treat every delimiter as a field separator, keeping empty fields; disables bracket and quote grouping.')

  mode = parser.add_mutually_exclusive_group()
  mode.add_argument('-online', action='store_true',
    help='Print rows immediately, using the column sizes estimated so far.')
  mode.add_argument('-column-info', dest='print_info', action='store_true',
    help='Print information about each column instead of the data.')

  parser.add_argument('-dbg', action='store_true', help='Log pipeline phases to stderr.')
  parser.add_argument('-version', action='version', version=version_str())
  return parser


def options_from_args(ns:Namespace) -> Options:
  opts = Options(
    truncate=None if ns.truncate is None else join_ranges(ns.truncate),
    ratio=ns.ratio,
    estimate_lines=ns.estimate_lines,
    include_cols=None if ns.include_cols is None else join_ranges(ns.include_cols),
    exclude_cols=join_ranges(ns.exclude_cols or ()),
    delims=ns.delims,
    out_delim=ns.out_delim,
    strict_delim=ns.strict_delim,
    online=ns.online,
    print_info=ns.print_info,
    dbg=ns.dbg)
  opts.validate()
  return opts


def ranges_arg(text:str) -> Ranges:
  try: return parse_ranges(text)
  except RangeError as e: raise ArgumentTypeError(str(e)) from e


def ratio_arg(text:str) -> float:
  try: ratio = float(text)
  except ValueError as e: raise ArgumentTypeError(f'could not parse {text!r} as a floating point number') from e
  if not ratio >= 0: raise ArgumentTypeError(f'ratio must be a non-negative number; received {text!r}')
  return ratio


def count_arg(text:str) -> int:
  try: count = int(text)
  except ValueError as e: raise ArgumentTypeError(f'could not parse {text!r} as a number') from e
  if count < 0: raise ArgumentTypeError(f'count must not be negative; received {text!r}')
  return count


if __name__ == '__main__': main()
