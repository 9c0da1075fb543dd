# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from io import StringIO

from coltab.column import calc_size, Column, ExtraInfo, MeasureColumn
from utest import utest, utest_out, utest_val


# Ratio zero fits the longest sample, regardless of the distribution.
utest(7, calc_size, [1, 3, 7], [5, 1, 1], 0)
utest(7, calc_size, [1, 3, 7], [1000, 1000, 1], 0)
utest(0, calc_size, [], [], 1.0)
utest(5, calc_size, [5], [3], 1.0)

utest(2, calc_size, [1, 2], [1, 1], 1.0)
utest(4, calc_size, [1, 4], [1, 1], 1.0)
# A single long outlier is not worth the padding at the default ratio...
utest(2, calc_size, [2, 20], [99, 1], 1.0)
# ...but is at a low ratio, where the score keeps falling all the way to the longest length.
utest(20, calc_size, [2, 20], [99, 1], 0.01)


col = MeasureColumn()
for sample in ['aaa', 'a', 'aaa', '']:
  col.add_sample(sample)
utest_val([0, 1, 3], col.lengths, desc='lengths')
utest_val([1, 1, 2], col.counts, desc='counts')
utest_val(4, sum(col.counts), desc='total count')
utest_val(None, col.info, desc='info is not collected by default')

size = col.calculate_size(1.0).size
utest_val(size, col.calculate_size(1.0).size, desc='calculate_size is repeatable')
utest_val([1, 1, 2], col.counts, desc='calculate_size does not mutate')
utest_val(3, col.calculate_size(0).size, desc='ratio zero')

# Lengths count characters, not encoded bytes.
wide_col = MeasureColumn()
for sample in ['é', 'éé']:
  wide_col.add_sample(sample)
utest_val([1, 2], wide_col.lengths, desc='multi-byte lengths')
utest_val(2, wide_col.calculate_size(0).size, desc='multi-byte ratio zero')


info_col = MeasureColumn(collect_info=True, excluded=True, truncated=True)
for sample in ['bb', 'a', 'cc', 'd', 'eee', 'fff']:
  info_col.add_sample(sample)
utest_val(ExtraInfo('a', 'eee'), info_col.info, desc='ties keep the earliest sample')
final = info_col.calculate_size(0)
utest_val(Column(size=3, excluded=True, truncated=True, info=ExtraInfo('a', 'eee')), final, desc='finalized column')


def render_cell(col:Column, cell:str, overflow:int, is_last:bool) -> tuple[str,int]:
  out = StringIO()
  overflow = col.print_cell(out, cell, overflow, is_last)
  return (out.getvalue(), overflow)


utest(('abcdef', 0), render_cell, Column(2), 'abcdef', 5, True) # Last cell is verbatim.
utest(('', 0), render_cell, Column(4), '', 0, True)
utest(('ab  ', 0), render_cell, Column(4), 'ab', 0, False)
utest(('abcdef', 2), render_cell, Column(4), 'abcdef', 0, False)
utest(('abc', 1), render_cell, Column(3), 'abc', 1, False)
utest(('a ', 0), render_cell, Column(4), 'a', 2, False) # Slack pays back the whole overflow.
utest(('abc', 2), render_cell, Column(4), 'abc', 3, False) # Partial payback.
utest(('a', 4), render_cell, Column(2), 'a', 5, False) # Overflow exceeds the column.

truncated = Column(4, truncated=True)
utest(('abc…', 0), render_cell, truncated, 'abcdef', 0, False)
utest(('ab…', 0), render_cell, truncated, 'abcdef', 1, False)
utest(('ab  ', 0), render_cell, truncated, 'ab', 0, False)
utest(('abcd', 0), render_cell, truncated, 'abcd', 0, False)
utest(('…', 1), render_cell, Column(2, truncated=True), 'abc', 2, False)
utest(('abcdef', 0), render_cell, truncated, 'abcdef', 3, True)


utest_out('  size: 4\n  excluded: false\n  truncated: true\n  shortest: \'a\' (1)\n  longest: \'abcd\' (4)\n',
  Column(4, truncated=True, info=ExtraInfo('a', 'abcd')).write_info)
utest_out('  size: 0\n  excluded: true\n  truncated: false\n', Column(0, excluded=True).write_info)
