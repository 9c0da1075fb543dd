# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from os import environ


__version__ = '0.1.0'


def version_str(build_info:str|None=None) -> str:
  '''
  Return the version string shown by `coltab -version`.
  `build_info` is an opaque suffix such as ' (1a2b3c4d5 2024-01-01)';
  it defaults to the COLTAB_BUILD_INFO environment variable, set by packaging scripts.
  '''
  if build_info is None: build_info = environ.get('COLTAB_BUILD_INFO', '')
  return f'coltab {__version__}{build_info}'
