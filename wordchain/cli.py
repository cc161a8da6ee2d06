import argparse, sys
from typing import List, Optional
from .trainer import MarkovTrainer
from .utils.tokens import MAX_WORD

def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(prog="wordchain", description="Generate text from a word-pair Markov chain built on FILE")
  parser.add_argument("file", help="input text file")
  parser.add_argument("nwords", nargs="?", type=int, default=100, help="number of words to generate (default: 100)")
  parser.add_argument("--seed", type=int, default=None, help="random seed, defaults to the current time")
  parser.add_argument("--max-word", type=int, default=MAX_WORD - 1, help="longest word kept in one piece (default: %(default)s)")
  parser.add_argument("--verbose", "-v", action="store_true", help="print build statistics to stderr")
  return parser

def main(argv: Optional[List[str]] = None) -> int:
  parser = build_parser()
  args = parser.parse_args(argv)
  if args.max_word < 1: parser.error(f"--max-word must be positive, got {args.max_word}")
  trainer = MarkovTrainer(max_word_length=args.max_word, seed=args.seed, verbose=args.verbose)
  try:
    with trainer:
      trainer.load_corpus(args.file)
      trainer.train()
      text = trainer.generate_text(args.nwords)
  except OSError as e:
    print(f"{e.filename or args.file}: {e.strerror or e}", file=sys.stderr)
    return 1
  except MemoryError:
    print("wordchain: out of memory", file=sys.stderr)
    return 1
  # stdout failures are reported without the input path
  try:
    sys.stdout.write(text)
    sys.stdout.flush()
  except OSError as e:
    print(f"wordchain: write error: {e.strerror or e}", file=sys.stderr)
    return 1
  return 0

if __name__ == "__main__": sys.exit(main())
