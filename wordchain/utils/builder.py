from collections import deque
from typing import Iterable, Optional
from .table import BOUNDARY, NPREF, Prefix, PrefixTable, Word, start_prefix

class ChainBuilder:
  """
    fills a PrefixTable from a stream of words
    the window starts as (BOUNDARY, BOUNDARY); every word records window -> word and
    then slides the window one step, so the first word is recorded after the start
    state and a final BOUNDARY is recorded after the last word
  """
  def __init__(self, table: Optional[PrefixTable] = None):
    self.table = table if table is not None else PrefixTable()
    self._window = deque(start_prefix(), maxlen=NPREF)
    self.tokens_read, self.finished = 0, False

  @property
  def window(self) -> Prefix: return tuple(self._window)

  def add(self, word: Word):
    entry = self.table.lookup(self._window, create=True)
    self.table.add_continuation(entry, word)
    self._window.append(word)  # maxlen drops the oldest

  def build(self, tokens: Iterable[str]) -> PrefixTable:
    if self.finished: raise RuntimeError("builder already finished; start a new ChainBuilder")
    for word in tokens:
      self.add(word)
      self.tokens_read += 1
    self.add(BOUNDARY)
    self.finished = True
    return self.table

def build_table(tokens: Iterable[str]) -> PrefixTable: return ChainBuilder().build(tokens)
