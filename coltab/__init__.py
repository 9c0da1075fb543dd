# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
coltab aligns loosely delimited tabular text into fixed width columns.
'''

from .column import Column, ExtraInfo, MeasureColumn
from .process import Options, OptionsError, process, render_text
from .ranges import Between, ColumnsStartAtOne, From, InvalidDecreasingRange, RangeError, RangeParseError, Ranges, To
from .row import Row, RowParser
