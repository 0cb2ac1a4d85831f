"""
The Cocke-Younger-Kasami algorithm: decides whether a word is derived by a grammar in Chomsky normal form.
"""
from typing import Dict, Tuple, Optional

from cyk.errors import EmptyGrammarError, NoStartSymbolError, InvalidWordError
from cyk.formatter import format_table
from cyk.grammar import CnfGrammar, Production
from cyk.table import DerivationTable, EMPTY_CELL, iter_bits


class ProductionIndex:
  """
  Productions of a grammar, looked up by right side.
  """

  def __init__(self, grammar):
    """
    :param CnfGrammar grammar:
    """
    self.non_terminals: Tuple[str, ...] = tuple(grammar.non_terminals)
    symbol_idx = {symbol: idx for idx, symbol in enumerate(self.non_terminals)}
    # a -> {A : A -> a}
    self.terminal_lefts: Dict[str, int] = {}
    # (B, C) -> {A : A -> B C}, by non-terminal index
    self.pair_lefts: Dict[Tuple[int, int], int] = {}
    for prod in grammar.prods:
      left_bit = 1 << symbol_idx[prod.left]
      if prod.is_terminal():
        terminal, = prod.right
        self.terminal_lefts[terminal] = self.terminal_lefts.get(terminal, EMPTY_CELL) | left_bit
      else:
        first, second = prod.right
        key = (symbol_idx[first], symbol_idx[second])
        self.pair_lefts[key] = self.pair_lefts.get(key, EMPTY_CELL) | left_bit

  def get_terminal_lefts(self, terminal: str) -> int:
    return self.terminal_lefts.get(terminal, EMPTY_CELL)

  def get_pair_lefts(self, first_cell: int, second_cell: int) -> int:
    """
    :returns: all A with A -> B C, for any B in `first_cell` and C in `second_cell`
    """
    lefts = EMPTY_CELL
    if first_cell == EMPTY_CELL or second_cell == EMPTY_CELL:
      return lefts
    for first in iter_bits(first_cell):
      for second in iter_bits(second_cell):
        lefts |= self.pair_lefts.get((first, second), EMPTY_CELL)
    return lefts


def check_query(grammar, word):
  """
  Raises if `word` cannot be checked against `grammar`.

  :param CnfGrammar grammar:
  :param str word:
  """
  if len(grammar.terminals) == 0:
    raise EmptyGrammarError('Grammar has no terminals')
  if len(grammar.prods) == 0:
    raise EmptyGrammarError('Grammar has no productions')
  if grammar.start is None:
    raise NoStartSymbolError()
  if len(word) == 0:
    raise InvalidWordError(word, 0, 'The empty word is never derived by a grammar in Chomsky normal form')
  for pos, char in enumerate(word):
    if char not in grammar.terminals:
      raise InvalidWordError(word, pos, 'Character %r is not a terminal of the grammar, expected one of %s' % (
        char, ', '.join(repr(terminal) for terminal in grammar.terminals)))


def _fill_table(table, index):
  """
  :param DerivationTable table: empty table
  :param ProductionIndex index:
  """
  word = table.word
  for offset, char in enumerate(word):
    table.set_cell(0, offset, index.get_terminal_lefts(char))
  # cell (l, s) only depends on cells of smaller length, so compute row by row
  for length_idx in range(1, table.num_rows):
    for offset in table.get_offsets(length_idx):
      cell = EMPTY_CELL
      for split in range(length_idx):
        cell |= index.get_pair_lefts(
          table.get_cell(split, offset), table.get_cell(length_idx - split - 1, offset + split + 1))
      table.set_cell(length_idx, offset, cell)


def make_derivation_table(grammar, word):
  """
  :param CnfGrammar grammar:
  :param str word:
  :rtype: DerivationTable
  """
  check_query(grammar, word)
  table = DerivationTable(word, grammar.non_terminals)
  _fill_table(table, ProductionIndex(grammar))
  return table


def is_derived(grammar, word):
  """
  :param CnfGrammar grammar:
  :param str word: consisting only of terminals of `grammar`
  :return: whether the start symbol of `grammar` derives `word`
  :rtype: bool
  """
  table = make_derivation_table(grammar, word)
  return table.contains(table.num_rows - 1, 0, grammar.start)


def algorithm_state_to_string(grammar, word):
  """
  :param CnfGrammar grammar:
  :param str word: consisting only of terminals of `grammar`
  :return: all cells computed for `word`, see :func:`format_table`
  :rtype: str
  """
  return format_table(make_derivation_table(grammar, word))


class CykAlgorithm:
  """
  Owns a grammar, that can be built up step by step and then queried.
  """

  def __init__(self, grammar: Optional[CnfGrammar] = None):
    if grammar is None:
      grammar = CnfGrammar()
    self.grammar = grammar

  def add_non_terminal(self, symbol: str):
    self.grammar.add_non_terminal(symbol)

  def add_terminal(self, symbol: str):
    self.grammar.add_terminal(symbol)

  def set_start_symbol(self, symbol: str):
    self.grammar.set_start_symbol(symbol)

  def add_production(self, left: str, right: str) -> Production:
    return self.grammar.add_production(left, right)

  def get_productions(self, left: str) -> str:
    return self.grammar.get_productions(left)

  def get_grammar(self) -> str:
    return self.grammar.get_grammar()

  def is_derived(self, word: str) -> bool:
    return is_derived(self.grammar, word)

  def algorithm_state_to_string(self, word: str) -> str:
    return algorithm_state_to_string(self.grammar, word)

  def remove_grammar(self):
    """
    Forgets all terminals, non-terminals, the start symbol and all productions.
    """
    self.grammar = CnfGrammar()
