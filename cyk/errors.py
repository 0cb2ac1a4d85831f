from typing import Optional


class GrammarError(Exception):
  def __init__(self, message: str):
    super(GrammarError, self).__init__(message)


def make_error_message(word: str, from_pos: int, error_name: str, message: str, to_pos: Optional[int] = None) -> str:
  """
  Shows `word` with the offending characters marked, e.g.::

    Invalid word at position 2:

      abXb
        ^

    message
  """
  indent_size = 2
  assert 0 <= from_pos <= len(word)
  if to_pos is not None:
    assert from_pos <= to_pos <= len(word)
  else:
    to_pos = from_pos + 1
  return '%s at position %s:\n\n' % (error_name, from_pos) + (
    ' ' * indent_size + word + '\n' +
    ' ' * (indent_size + from_pos) + '^' * max(1, to_pos - from_pos)
  ) + '\n\n' + message


class InvalidSymbolError(GrammarError):
  """
  A symbol that may not be added to an alphabet, because it has the wrong shape or is already declared.
  """

  def __init__(self, symbol, message):
    """
    :param str symbol:
    :param str message:
    """
    self.symbol = symbol
    super().__init__('Invalid symbol %r: %s' % (symbol, message))


class UnknownSymbolError(GrammarError):
  """
  A non-terminal that was referenced, but never declared.
  """

  def __init__(self, symbol, message):
    """
    :param str symbol:
    :param str message:
    """
    self.symbol = symbol
    super().__init__('Unknown symbol %r: %s' % (symbol, message))


class InvalidProductionError(GrammarError):
  """
  A production that is not in Chomsky normal form, i.e. neither `A -> a` nor `A -> BC` over declared symbols.
  """

  def __init__(self, left, right, message):
    """
    :param str left:
    :param str right:
    :param str message:
    """
    self.left = left
    self.right = right
    super().__init__('Invalid production %s::=%s: %s' % (left, right, message))


class DuplicateProductionError(GrammarError):
  def __init__(self, left, right):
    """
    :param str left:
    :param str right:
    """
    self.left = left
    self.right = right
    super().__init__('Production %s::=%s is already defined' % (left, right))


class EmptyGrammarError(GrammarError):
  """
  A word was queried against a grammar without terminals or without productions.
  """


class NoStartSymbolError(GrammarError):
  def __init__(self):
    super().__init__('Grammar has no start symbol')


class InvalidWordError(GrammarError):
  """
  A word that cannot be checked against the grammar, because it uses characters outside the terminal alphabet.
  """

  def __init__(self, word, pos, message):
    """
    :param str word:
    :param int pos: word position where error occurred
    :param str message:
    """
    self.word = word
    self.pos = pos
    super().__init__(make_error_message(word, pos, error_name='Invalid word', message=message))
