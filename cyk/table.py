from typing import List, Tuple, Iterator, Sequence

"""
Empty set of non-terminals.
"""
EMPTY_CELL = 0


def iter_bits(cell: int) -> Iterator[int]:
  """
  :returns: indices of all set bits, lowest first
  """
  pos = 0
  while cell:
    if cell & 1:
      yield pos
    cell >>= 1
    pos += 1


class DerivationTable:
  """
  The triangular CYK table for a fixed word.

  Cell (l, s) holds the set of non-terminals that derive the sub-word of length l + 1 starting at offset s.
  A set is stored as an int, where bit i stands for ``non_terminals[i]``.
  """

  def __init__(self, word: str, non_terminals: Sequence[str]):
    assert len(word) >= 1
    self.word = word
    self.non_terminals: Tuple[str, ...] = tuple(non_terminals)
    self._symbol_bits = {symbol: 1 << idx for idx, symbol in enumerate(self.non_terminals)}
    self._rows: List[List[int]] = [[EMPTY_CELL] * (len(word) - length_idx) for length_idx in range(len(word))]

  @property
  def num_rows(self) -> int:
    return len(self._rows)

  def get_offsets(self, length_idx: int) -> range:
    assert 0 <= length_idx < self.num_rows
    return range(len(self._rows[length_idx]))

  def get_cell(self, length_idx: int, offset: int) -> int:
    assert 0 <= length_idx < self.num_rows and 0 <= offset < len(self._rows[length_idx])
    return self._rows[length_idx][offset]

  def set_cell(self, length_idx: int, offset: int, cell: int):
    assert 0 <= length_idx < self.num_rows and 0 <= offset < len(self._rows[length_idx])
    assert 0 <= cell < (1 << len(self.non_terminals))
    self._rows[length_idx][offset] = cell

  def get_symbols(self, length_idx: int, offset: int) -> Tuple[str, ...]:
    """
    :returns: the non-terminals of the cell, in declaration order
    """
    return tuple(self.non_terminals[idx] for idx in iter_bits(self.get_cell(length_idx, offset)))

  def contains(self, length_idx: int, offset: int, symbol: str) -> bool:
    if symbol not in self._symbol_bits:
      return False
    return bool(self.get_cell(length_idx, offset) & self._symbol_bits[symbol])

  def get_full_span_symbols(self) -> Tuple[str, ...]:
    """
    :returns: all non-terminals that derive the whole word
    """
    return self.get_symbols(self.num_rows - 1, 0)

  def __repr__(self):
    return 'DerivationTable[%r: %s]' % (self.word, ' / '.join(
      ' '.join(''.join(self.get_symbols(length_idx, offset)) or '-' for offset in self.get_offsets(length_idx))
      for length_idx in range(self.num_rows)))
