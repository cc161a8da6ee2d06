import sys, time, random
from typing import List, Optional
from .utils.builder import ChainBuilder
from .utils.generator import generate, render
from .utils.table import PrefixTable
from .utils.tokens import MAX_WORD, read_words

class MarkovTrainer:
  def __init__(self, max_word_length: int = MAX_WORD - 1, seed: Optional[int] = None, verbose: bool = False):
    self.max_word_length, self.verbose = max_word_length, verbose
    self.seed = int(time.time()) if seed is None else seed
    self.rng = random.Random(self.seed)  # seeded once, shared by every generate() call
    self.table: Optional[PrefixTable] = None
    self.builder: Optional[ChainBuilder] = None
    self.path: Optional[str] = None

  def _log(self, msg: str):
    if self.verbose: print(msg, file=sys.stderr)

  def load_corpus(self, path: str):
    # fail here, before any model state changes, if the file cannot be opened
    with open(path, "rb"): pass
    self.path, self.table, self.builder = path, None, None

  def train(self) -> PrefixTable:
    if self.path is None: raise RuntimeError("No corpus loaded. Call load_corpus() first.")
    builder = ChainBuilder()
    # file is closed before generation can start, and on any error while reading
    with open(self.path, "r", encoding="utf-8", errors="replace") as f:
      builder.build(read_words(f, self.max_word_length))
    self.builder, self.table = builder, builder.table
    stats = self.table.stats()
    self._log(f"Read {builder.tokens_read} words from {self.path}")
    self._log(f"Built {stats['prefixes']} prefixes, {stats['continuations']} continuations (longest chain {stats['longest_chain']})")
    return self.table

  def train_words(self, words) -> PrefixTable:
    builder = ChainBuilder()
    builder.build(words)
    self.builder, self.table = builder, builder.table
    return self.table

  def generate(self, nwords: int = 100) -> List[str]:
    if self.table is None: raise RuntimeError("Model not trained. Call train() first.")
    words = list(generate(self.table, nwords, self.rng))
    self._log(f"Generated {len(words)} words (seed {self.seed})")
    return words

  def generate_text(self, nwords: int = 100) -> str: return render(self.generate(nwords))

  def destroy(self): self.table, self.builder = None, None

  def __enter__(self): return self
  def __exit__(self, exc_type, exc, tb): self.destroy()
