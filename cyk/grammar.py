"""
Context free grammars in Chomsky normal form.

Symbols are single characters: lowercase letters are terminals, uppercase letters are non-terminals.
"""
from typing import Tuple, Dict, List, Optional

from cyk.errors import InvalidSymbolError, UnknownSymbolError, InvalidProductionError, DuplicateProductionError

PRODUCTION_SYMBOL = '::='
PRODUCTION_SEPARATOR = '|'
UNSET_START_SYMBOL = '?'


def is_terminal_symbol(symbol):
  """
  :param str symbol:
  :rtype: bool
  """
  return isinstance(symbol, str) and len(symbol) == 1 and symbol.isalpha() and symbol.islower()


def is_non_terminal_symbol(symbol):
  """
  :param str symbol:
  :rtype: bool
  """
  return isinstance(symbol, str) and len(symbol) == 1 and symbol.isalpha() and symbol.isupper()


class Production:
  """
  A production A -> a or A -> B C.
  """

  def __init__(self, left, *right):
    """
    :param str left: A
    :param str right: a, or B C
    """
    self.left = left
    assert 1 <= len(right) <= 2
    self.right: Tuple[str, ...] = right

  @property
  def right_word(self) -> str:
    return ''.join(self.right)

  def is_terminal(self) -> bool:
    return len(self.right) == 1

  def __repr__(self):
    return 'Production[%r -> %s]' % (self.left, ' '.join([repr(symbol) for symbol in self.right]))

  def __str__(self):
    return '%s%s%s' % (self.left, PRODUCTION_SYMBOL, self.right_word)

  def __hash__(self):
    return hash((self.left, self.right))

  def __eq__(self, other):
    if not isinstance(other, Production):
      return False
    return self.left == other.left and self.right == other.right


class CnfGrammar:
  """
  A context free grammar in Chomsky normal form, built up symbol by symbol.

  All mutating methods first check the new element and only then change the grammar,
  so a raised `GrammarError` leaves the grammar as it was.
  """

  def __init__(self):
    self.terminals: List[str] = []
    self.non_terminals: List[str] = []
    self.start: Optional[str] = None
    self._prods_by_left: Dict[str, List[Production]] = {}

  @classmethod
  def from_dict(cls, prods, start=None):
    """
    :param dict[str, list[str]] prods: left non-terminal -> right sides, e.g. ``{'S': ['AB'], 'A': ['a']}``.
      Non-terminals are declared in key order, terminals in order of first appearance on a right side.
    :param None|str start: start non-terminal, by default the first left side
    :rtype: CnfGrammar
    """
    grammar = cls()
    for left in prods:
      grammar.add_non_terminal(left)
    for rights in prods.values():
      for right in rights:
        for symbol in right:
          if is_terminal_symbol(symbol) and symbol not in grammar.terminals:
            grammar.add_terminal(symbol)
    for left, rights in prods.items():
      for right in rights:
        grammar.add_production(left, right)
    if start is None and len(grammar.non_terminals) > 0:
      start = grammar.non_terminals[0]
    if start is not None:
      grammar.set_start_symbol(start)
    return grammar

  @property
  def symbols(self) -> Tuple[str, ...]:
    return tuple(self.non_terminals) + tuple(self.terminals)

  @property
  def prods(self) -> Tuple[Production, ...]:
    """
    All productions, grouped by left side in non-terminal declaration order.
    """
    return tuple(prod for left in self.non_terminals for prod in self._prods_by_left.get(left, []))

  def add_non_terminal(self, symbol):
    """
    :param str symbol: e.g. 'S'
    """
    if not is_non_terminal_symbol(symbol):
      raise InvalidSymbolError(symbol, 'non-terminals must be a single uppercase letter')
    if symbol in self.non_terminals:
      raise InvalidSymbolError(symbol, 'non-terminal is already declared')
    self.non_terminals.append(symbol)

  def add_terminal(self, symbol):
    """
    :param str symbol: e.g. 'a'
    """
    if not is_terminal_symbol(symbol):
      raise InvalidSymbolError(symbol, 'terminals must be a single lowercase letter')
    if symbol in self.terminals:
      raise InvalidSymbolError(symbol, 'terminal is already declared')
    self.terminals.append(symbol)

  def set_start_symbol(self, symbol):
    """
    :param str symbol: a declared non-terminal
    """
    if symbol not in self.non_terminals:
      raise UnknownSymbolError(symbol, 'start symbol must be a declared non-terminal')
    self.start = symbol

  def is_valid_production(self, right):
    """
    :param str right: either one declared terminal, or two declared non-terminals
    :rtype: bool
    """
    if not isinstance(right, str):
      return False
    if len(right) == 1:
      return right in self.terminals
    if len(right) == 2:
      return all(symbol in self.non_terminals for symbol in right)
    return False

  def add_production(self, left, right):
    """
    :param str left: A
    :param str right: "BC" or "a"
    :rtype: Production
    """
    if left not in self.non_terminals:
      raise UnknownSymbolError(left, 'left side of a production must be a declared non-terminal')
    if not self.is_valid_production(right):
      raise InvalidProductionError(
        left, right, 'right side must be one declared terminal or two declared non-terminals')
    prod = Production(left, *right)
    if prod in self._prods_by_left.get(left, []):
      raise DuplicateProductionError(left, right)
    self._prods_by_left.setdefault(left, []).append(prod)
    return prod

  def get_prods_for(self, left):
    """
    :param str left: left-hand non-terminal of production
    :rtype: tuple[Production]
    """
    return tuple(self._prods_by_left.get(left, []))

  def get_productions(self, left):
    """
    :param str left:
    :return: e.g. ``S::=AB|BC``, or the empty string if `left` has no productions
    :rtype: str
    """
    prods = self.get_prods_for(left)
    if len(prods) == 0:
      return ''
    return left + PRODUCTION_SYMBOL + PRODUCTION_SEPARATOR.join(prod.right_word for prod in prods)

  def get_grammar(self):
    """
    :return: e.g. ``G=({a,b},{S,A},S,P)\\nP={\\nS::=AB\\nA::=a\\n}``
    :rtype: str
    """
    prod_lines = [self.get_productions(left) for left in self.non_terminals]
    return 'G=({%s},{%s},%s,P)\nP={\n%s}' % (
      ','.join(self.terminals), ','.join(self.non_terminals),
      UNSET_START_SYMBOL if self.start is None else self.start,
      ''.join(line + '\n' for line in prod_lines if line != ''))

  def __repr__(self):
    return 'CnfGrammar[terminals=%r, non_terminals=%r, start=%r, prods=%r]' % (
      self.terminals, self.non_terminals, self.start, self.prods)
