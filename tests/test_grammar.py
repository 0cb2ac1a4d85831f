import _setup_test_env  # noqa
import sys
import unittest
import better_exchook
import pytest

from cyk.errors import InvalidSymbolError, UnknownSymbolError, InvalidProductionError, DuplicateProductionError, \
  GrammarError
from cyk.grammar import CnfGrammar, Production, is_terminal_symbol, is_non_terminal_symbol


def _make_simple_grammar():
  g = CnfGrammar()
  for symbol in 'SAB':
    g.add_non_terminal(symbol)
  for symbol in 'ab':
    g.add_terminal(symbol)
  g.set_start_symbol('S')
  g.add_production('S', 'AB')
  g.add_production('A', 'a')
  g.add_production('B', 'b')
  return g


def test_Production():
  assert Production('S', 'A', 'B') == Production('S', 'A', 'B')
  assert Production('S', 'A', 'B') != Production('S', 'B', 'A')
  assert Production('A', 'a') != Production('B', 'a')
  assert len({Production('A', 'a'), Production('A', 'a'), Production('A', 'b')}) == 2
  assert Production('S', 'A', 'B').right_word == 'AB'
  assert str(Production('S', 'A', 'B')) == 'S::=AB'
  assert Production('A', 'a').is_terminal()
  assert not Production('S', 'A', 'B').is_terminal()


def test_symbol_predicates():
  assert is_terminal_symbol('a')
  assert not is_terminal_symbol('A')
  assert not is_terminal_symbol('ab')
  assert not is_terminal_symbol('1')
  assert not is_terminal_symbol('')
  assert not is_terminal_symbol(None)
  assert is_non_terminal_symbol('S')
  assert not is_non_terminal_symbol('s')
  assert not is_non_terminal_symbol('+')


def test_CnfGrammar_add_non_terminal():
  g = CnfGrammar()
  g.add_non_terminal('S')
  g.add_non_terminal('A')
  assert g.non_terminals == ['S', 'A']
  for bad_symbol in ['S', 's', '1', '', 'AB', ' ', None]:
    with pytest.raises(InvalidSymbolError):
      g.add_non_terminal(bad_symbol)
  assert g.non_terminals == ['S', 'A']
  assert g.terminals == []


def test_CnfGrammar_add_terminal():
  g = CnfGrammar()
  g.add_terminal('b')
  assert len(g.terminals) == 1
  g.add_terminal('a')
  assert g.terminals == ['b', 'a']
  for bad_symbol in ['a', 'A', '0', '', 'ab', '*']:
    with pytest.raises(InvalidSymbolError):
      g.add_terminal(bad_symbol)
  assert g.terminals == ['b', 'a']
  assert g.non_terminals == []


def test_CnfGrammar_alphabets_disjoint_by_case():
  g = CnfGrammar()
  g.add_non_terminal('A')
  g.add_terminal('a')
  assert g.symbols == ('A', 'a')


def test_CnfGrammar_set_start_symbol():
  g = CnfGrammar()
  assert g.start is None
  with pytest.raises(UnknownSymbolError):
    g.set_start_symbol('S')
  g.add_non_terminal('S')
  g.add_non_terminal('T')
  g.set_start_symbol('S')
  assert g.start == 'S'
  g.set_start_symbol('T')
  assert g.start == 'T'
  g.add_terminal('a')
  with pytest.raises(UnknownSymbolError):
    g.set_start_symbol('a')
  assert g.start == 'T'


def test_CnfGrammar_add_production():
  g = _make_simple_grammar()
  assert g.get_prods_for('S') == (Production('S', 'A', 'B'),)
  prod = g.add_production('S', 'BA')
  assert prod == Production('S', 'B', 'A')
  assert g.get_prods_for('S') == (Production('S', 'A', 'B'), Production('S', 'B', 'A'))
  assert g.get_prods_for('B') == (Production('B', 'b'),)


def test_CnfGrammar_add_production_errors():
  g = _make_simple_grammar()
  before = g.get_grammar()
  with pytest.raises(UnknownSymbolError):
    g.add_production('X', 'AB')
  with pytest.raises(UnknownSymbolError):
    g.add_production('a', 'AB')
  for bad_right in ['', 'ABS', 'aa', 'Ab', 'aB', 'c', 'AX', 'A', 'abc']:
    with pytest.raises(InvalidProductionError):
      g.add_production('S', bad_right)
  with pytest.raises(DuplicateProductionError):
    g.add_production('S', 'AB')
  with pytest.raises(DuplicateProductionError):
    g.add_production('A', 'a')
  assert g.get_grammar() == before


def test_CnfGrammar_no_forward_references():
  g = CnfGrammar()
  g.add_non_terminal('S')
  with pytest.raises(InvalidProductionError):
    g.add_production('S', 'SA')
  with pytest.raises(InvalidProductionError):
    g.add_production('S', 'a')
  g.add_non_terminal('A')
  g.add_terminal('a')
  g.add_production('S', 'SA')
  g.add_production('S', 'a')
  assert g.get_productions('S') == 'S::=SA|a'


def test_CnfGrammar_is_valid_production():
  g = _make_simple_grammar()
  assert g.is_valid_production('a')
  assert g.is_valid_production('SS')
  assert not g.is_valid_production('A')
  assert not g.is_valid_production('')
  assert not g.is_valid_production('SSS')
  assert not g.is_valid_production(None)


def test_CnfGrammar_get_productions():
  g = _make_simple_grammar()
  assert g.get_productions('S') == 'S::=AB'
  g.add_production('S', 'BB')
  g.add_production('S', 'a')
  assert g.get_productions('S') == 'S::=AB|BB|a'
  g.add_non_terminal('C')
  assert g.get_productions('C') == ''
  assert g.get_productions('X') == ''


def test_CnfGrammar_get_grammar():
  g = _make_simple_grammar()
  assert g.get_grammar() == 'G=({a,b},{S,A,B},S,P)\nP={\nS::=AB\nA::=a\nB::=b\n}'
  for line in ['S::=AB', 'A::=a', 'B::=b']:
    assert line in g.get_grammar()


def test_CnfGrammar_get_grammar_skips_non_terminals_without_productions():
  g = CnfGrammar()
  g.add_terminal('a')
  g.add_terminal('b')
  g.add_non_terminal('S')
  g.add_non_terminal('A')
  g.set_start_symbol('S')
  g.add_production('A', 'a')
  assert g.get_grammar() == 'G=({a,b},{S,A},S,P)\nP={\nA::=a\n}'


def test_CnfGrammar_get_grammar_empty():
  assert CnfGrammar().get_grammar() == 'G=({},{},?,P)\nP={\n}'


def test_CnfGrammar_from_dict():
  g = CnfGrammar.from_dict({
    'S': ['AB', 'BC'],
    'A': ['BA', 'a'],
    'B': ['CC', 'b'],
    'C': ['AB', 'a']
  })
  assert g.non_terminals == ['S', 'A', 'B', 'C']
  assert g.terminals == ['a', 'b']
  assert g.start == 'S'
  assert len(g.prods) == 8
  assert g.get_productions('A') == 'A::=BA|a'
  assert CnfGrammar.from_dict({'S': ['a'], 'T': ['b']}, start='T').start == 'T'
  with pytest.raises(GrammarError):
    CnfGrammar.from_dict({'S': ['ABC']})


if __name__ == "__main__":
  try:
    better_exchook.install()
    if len(sys.argv) <= 1:
      for k, v in sorted(globals().items()):
        if k.startswith("test_"):
          print("-" * 40)
          print("Executing: %s" % k)
          try:
            v()
          except unittest.SkipTest as exc:
            print("SkipTest:", exc)
          print("-" * 40)
      print("Finished all tests.")
    else:
      assert len(sys.argv) >= 2
      for arg in sys.argv[1:]:
        print("Executing: %s" % arg)
        if arg in globals():
          globals()[arg]()  # assume function and execute
        else:
          eval(arg)  # assume Python code and execute
  finally:
    pass
