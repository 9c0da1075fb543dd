#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd
from sys import executable

from pithy.fs import make_dirs, walk_files
from pithy.path import path_rel_to_dir
from pithy.task import runC


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()
  paths = list(walk_files(*args.paths, file_exts=['.ut.py']))
  if not paths: exit(f'utest: no tests found in: {" ".join(args.paths)}')

  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', getcwd())
  # Test scripts run from the build directory but import the packages at the project root.
  pythonpath = env.get('PYTHONPATH')
  env['PYTHONPATH'] = getcwd() if not pythonpath else f'{getcwd()}:{pythonpath}'

  utest_cwd = '_build/_utest'
  make_dirs(utest_cwd)
  failed:list[str] = []
  for path in paths:
    print(path)
    exe_path = path_rel_to_dir(path, utest_cwd)
    c = runC([executable, exe_path], cwd=utest_cwd, env=env)
    if c != 0:
      failed.append(path)
      print()

  if failed:
    print(f'utest: {len(failed)} of {len(paths)} test files failed.')
  exit(1 if failed else 0)


if __name__ == '__main__': main()
