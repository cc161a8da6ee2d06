import regex as re
from typing import Iterator, TextIO

MAX_WORD = 100
# C-locale isspace(); anything else, unicode spaces included, is part of a word
WORD_PATTERN = re.compile(r"[^ \t\n\r\f\v]+")

def split_words(text: str, max_len: int = MAX_WORD - 1) -> Iterator[str]:
  """
    yields whitespace-delimited words of text, in order
    runs longer than max_len are cut into consecutive max_len sized pieces, the same
    way a bounded scanf("%99s") keeps reading the rest of a long run as the next word
    eg: split_words("ab  cdefg", 3) -> "ab", "cde", "fg"
  """
  if max_len < 1: raise ValueError(f"max_len must be positive, got {max_len}")
  for match in WORD_PATTERN.finditer(text):
    word = match.group()
    for i in range(0, len(word), max_len): yield word[i:i + max_len]

def read_words(stream: TextIO, max_len: int = MAX_WORD - 1) -> Iterator[str]:
  # lazy, line at a time; a line never splits a word since newline is whitespace
  for line in stream: yield from split_words(line, max_len)
