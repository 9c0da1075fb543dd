# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from coltab.ranges import (Between, ColumnsStartAtOne, From, InvalidDecreasingRange, join_ranges, parse_range,
  parse_ranges, RangeParseError, Ranges, To)
from utest import utest, utest_exc, utest_val


utest(Between(1, 1), parse_range, '1')
utest(Between(12, 12), parse_range, '12')
utest(From(2), parse_range, '2-')
utest(To(2), parse_range, '-2')
utest(Between(2, 5), parse_range, '2-5')
utest(Between(3, 3), parse_range, '3-3')

utest_exc(ColumnsStartAtOne(), parse_range, '0')
utest_exc(ColumnsStartAtOne(), parse_range, '0-')
utest_exc(ColumnsStartAtOne(), parse_range, '-0')
utest_exc(ColumnsStartAtOne(), parse_range, '0-3')
utest_exc(InvalidDecreasingRange('3-1'), parse_range, '3-1')
utest_exc(InvalidDecreasingRange('3-0'), parse_range, '3-0')

for text in ['', '-', 'a', '1-2-3', ' 1', '1 ', '+1', '1.5', '--2']:
  utest_exc(RangeParseError(text), parse_range, text)

utest_val('columns are numbered starting from 1', str(ColumnsStartAtOne()))
utest_val('invalid decreasing range: 3-1', str(InvalidDecreasingRange('3-1')))
utest_val("could not parse 'x' as a range", str(RangeParseError('x')))

# Direct construction enforces the same constraints.
utest_exc(ColumnsStartAtOne(), From, 0)
utest_exc(ColumnsStartAtOne(), To, 0)
utest_exc(InvalidDecreasingRange('3-1'), Between, 3, 1)


from_2 = parse_ranges('2-')
utest(False, from_2.any_contains, 1)
utest(True, from_2.any_contains, 2)
utest(True, from_2.any_contains, 100)

to_2 = parse_ranges('-2')
utest(True, to_2.any_contains, 1)
utest(True, to_2.any_contains, 2)
utest(False, to_2.any_contains, 3)

mixed = parse_ranges('1,3-4,7-')
utest_val(Ranges((Between(1, 1), Between(3, 4), From(7))), mixed)
utest_val('1,3-4,7-', str(mixed))
utest_val([True, False, True, True, False, False, True, True],
  [mixed.any_contains(n) for n in range(1, 9)], desc='mixed membership')

utest(False, Ranges().any_contains, 1)
utest(True, Ranges.all().any_contains, 1)
utest(True, Ranges.all().any_contains, 1000)

utest_exc(RangeParseError(''), parse_ranges, '1,,2')
utest_exc(ColumnsStartAtOne(), parse_ranges, '1,0')

utest(Ranges((Between(2, 2), From(4))), join_ranges, [parse_ranges('2'), parse_ranges('4-')])
utest(Ranges(), join_ranges, [])
