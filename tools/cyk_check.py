#!/usr/bin/env python3

"""
Main entry point: Check words against a grammar in Chomsky normal form.
"""
import argparse
import sys
from typing import List

import better_exchook

import _setup_cyk_env  # noqa
from cyk.algorithm import CykAlgorithm
from cyk.errors import GrammarError
from cyk.grammar import PRODUCTION_SEPARATOR


def _parse_production(production: str) -> (str, List[str]):
  """
   :param production: e.g. ``S=AB`` or ``S=AB|BA``
  """
  if '=' not in production:
    raise argparse.ArgumentTypeError('Production %r must have the form LEFT=RIGHT' % production)
  left, rights = production.split('=', 1)
  if left.endswith('::'):
    left = left[:-2]
  return left, rights.split(PRODUCTION_SEPARATOR)


def main():
  """
  Main entry point.
  """
  better_exchook.install()
  parser = argparse.ArgumentParser(description='Check words against a grammar in Chomsky normal form.')
  parser.add_argument('words', nargs='*', help='Words to check')
  parser.add_argument('--terminals', '-t', default='', help='Terminals, e.g. ab')
  parser.add_argument('--non-terminals', '-n', dest='non_terminals', default='', help='Non-terminals, e.g. SAB')
  parser.add_argument('--start', '-s', default=None, help='Start non-terminal, by default the first non-terminal')
  parser.add_argument(
    '--production', '-p', dest='productions', action='append', default=[], type=_parse_production,
    help='Production, e.g. S=AB or S=AB|BA. Can be given multiple times.')
  parser.add_argument('--table', dest='table', action='store_true', help='Print the derivation table of each word.')
  parser.add_argument(
    '--verbose', dest='verbose', action='store_true', help='Print full stacktrace for all grammar errors.')

  args = parser.parse_args()

  algorithm = CykAlgorithm()
  try:
    for symbol in args.non_terminals:
      algorithm.add_non_terminal(symbol)
    for symbol in args.terminals:
      algorithm.add_terminal(symbol)
    start = args.start
    if start is None and len(args.non_terminals) > 0:
      start = args.non_terminals[0]
    if start is not None:
      algorithm.set_start_symbol(start)
    for left, rights in args.productions:
      for right in rights:
        algorithm.add_production(left, right)
  except GrammarError as ge:
    if args.verbose:
      raise ge
    else:
      print(str(ge))
      sys.exit(2)

  print(algorithm.get_grammar())
  exit_code = 0
  for word in args.words:
    try:
      derived = algorithm.is_derived(word)
      if args.table:
        print(algorithm.algorithm_state_to_string(word), end='')
    except GrammarError as ge:
      if args.verbose:
        raise ge
      print(str(ge))
      exit_code = 1
      continue
    print('%s: %s' % (word, 'accepted' if derived else 'rejected'))
  sys.exit(exit_code)


if __name__ == '__main__':
  main()
