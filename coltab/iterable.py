# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Iterable, Iterator, TypeVar


_T = TypeVar('_T')


def iter_first_last(iterable:Iterable[_T]) -> Iterator[tuple[_T, bool, bool]]:
  'Yield (element, is_first, is_last) triples.'
  it = iter(iterable)
  try: head = next(it)
  except StopIteration: return
  is_first = True
  for el in it:
    yield (head, is_first, False)
    head = el
    is_first = False
  yield (head, is_first, True)
