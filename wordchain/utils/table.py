from collections import deque
from typing import Iterator, Optional, Tuple, Union

NPREF, HASHSIZE, MULTIPLIER = 2, 4093, 31
NONWORD = "\n"  # text the boundary marker hashes as

class Boundary:
  """
    start/end-of-text marker, a singleton that never compares equal to a real word
    (a word that happens to be "\\n" is still a word)
  """
  _instance = None
  def __new__(cls):
    if cls._instance is None: cls._instance = super().__new__(cls)
    return cls._instance
  def __repr__(self): return "BOUNDARY"

BOUNDARY = Boundary()
Word = Union[str, Boundary]
Prefix = Tuple[Word, ...]

def start_prefix() -> Prefix: return (BOUNDARY,) * NPREF

class ModelEntry:
  __slots__ = ("prefix", "continuations")
  def __init__(self, prefix: Prefix):
    self.prefix, self.continuations = prefix, deque()

  def add(self, word: Word):
    # newest first, repeats kept
    self.continuations.appendleft(word)

  def __len__(self): return len(self.continuations)
  def __repr__(self): return f"ModelEntry({self.prefix!r}, {list(self.continuations)!r})"

class PrefixTable:
  """
    prefix -> ModelEntry store, fixed number of buckets with chaining on collision
    eg: table.lookup(("the", "cat"), create=True).add("sat")
    entries are never removed; the generator only reads
  """
  def __init__(self, size: int = HASHSIZE):
    self.size, self.count = size, 0
    self.buckets = [[] for _ in range(self.size)]

  def _hash(self, prefix: Prefix) -> int:
    h = 0
    for word in prefix:
      for ch in (NONWORD if word is BOUNDARY else word):
        h = (h * MULTIPLIER + ord(ch)) & 0xFFFFFFFF  # unsigned 32-bit wraparound
    return h % self.size

  def _check(self, prefix) -> Prefix:
    prefix = tuple(prefix)
    if len(prefix) != NPREF: raise ValueError(f"prefix must have {NPREF} words, got {len(prefix)}: {prefix!r}")
    return prefix

  def lookup(self, prefix, create: bool = False) -> Optional[ModelEntry]:
    prefix = self._check(prefix)
    bucket = self.buckets[self._hash(prefix)]
    for entry in bucket:
      if all(a == b for a, b in zip(prefix, entry.prefix)): return entry
    if not create: return None
    entry = ModelEntry(prefix)
    bucket.insert(0, entry)
    self.count += 1
    return entry

  def add_continuation(self, entry: ModelEntry, word: Word): entry.add(word)

  def get(self, prefix, default=None):
    entry = self.lookup(prefix)
    return default if entry is None else entry

  def __contains__(self, prefix) -> bool: return self.lookup(prefix) is not None
  def __len__(self): return self.count

  def items(self) -> Iterator[Tuple[Prefix, ModelEntry]]:
    for bucket in self.buckets:
      for entry in bucket: yield entry.prefix, entry

  def stats(self) -> dict:
    return {
      "prefixes": self.count,
      "continuations": sum(len(entry) for bucket in self.buckets for entry in bucket),
      "longest_chain": max((len(bucket) for bucket in self.buckets), default=0),
    }
