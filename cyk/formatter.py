from typing import List

from cyk.table import DerivationTable

CELL_SEPARATOR = ' '


def get_column_widths(table: DerivationTable) -> List[int]:
  """
  :returns: for each offset, the widest cell of that offset over all span lengths
  """
  widths = [0] * len(table.word)
  for length_idx in range(table.num_rows):
    for offset in table.get_offsets(length_idx):
      widths[offset] = max(widths[offset], len(table.get_symbols(length_idx, offset)))
  return widths


def format_table(table: DerivationTable) -> str:
  """
  One line per span length, shortest spans first. E.g. for S -> A B, A -> a, B -> b and the word ``ab``::

    A B
    S

  (every cell is followed by a separating space).
  """
  widths = get_column_widths(table)
  lines = []
  for length_idx in range(table.num_rows):
    lines.append(''.join(
      ''.join(table.get_symbols(length_idx, offset)).ljust(widths[offset]) + CELL_SEPARATOR
      for offset in table.get_offsets(length_idx)) + '\n')
  return ''.join(lines)
