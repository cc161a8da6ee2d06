import random
from typing import Iterable, Iterator, Optional
from .table import BOUNDARY, PrefixTable, start_prefix

def generate(table: PrefixTable, max_words: int = 100, rng: Optional[random.Random] = None, prefix=None) -> Iterator[str]:
  """
    walks the chain from the start state and yields at most max_words words
    at each step one recorded continuation of the current prefix is picked uniformly,
    repeated continuations weigh in as many times as they were seen
    stops early, without error, on an unseen prefix, an empty entry or BOUNDARY
    the returned generator is single-use, call again for a fresh walk
  """
  rng = rng if rng is not None else random
  w0, w1 = start_prefix() if prefix is None else tuple(prefix)
  for _ in range(max_words):
    entry = table.lookup((w0, w1))
    if entry is None: return  # dead end
    n = len(entry)
    if n == 0: return
    word = entry.continuations[rng.randrange(n)]
    if word is BOUNDARY: return
    yield word
    w0, w1 = w1, word

def render(words: Iterable[str]) -> str:
  # one line whatever the reason the walk ended, empty walks included
  return " ".join(words) + "\n"
