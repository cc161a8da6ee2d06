import pytest
from wordchain.utils.builder import ChainBuilder, build_table
from wordchain.utils.table import BOUNDARY, start_prefix

def continuations(table, prefix): return list(table.lookup(prefix).continuations)

def test_two_word_chain():
  table = build_table(["the", "cat"])
  assert len(table) == 3
  assert continuations(table, (BOUNDARY, BOUNDARY)) == ["the"]
  assert continuations(table, (BOUNDARY, "the")) == ["cat"]
  assert continuations(table, ("the", "cat")) == [BOUNDARY]

def test_empty_input_records_start_to_end():
  table = build_table([])
  assert len(table) == 1
  assert continuations(table, start_prefix()) == [BOUNDARY]

def test_first_word_follows_start_state():
  table = build_table("it was the best of times".split())
  assert "it" in continuations(table, start_prefix())

def test_last_transition_is_to_boundary():
  builder = ChainBuilder()
  table = builder.build("a b c a b d".split())
  assert continuations(table, ("b", "d")) == [BOUNDARY]
  assert builder.window == ("d", BOUNDARY)
  assert builder.tokens_read == 6

def test_repeated_prefix_collects_every_occurrence():
  table = build_table("x y a x y b x y a".split())
  assert sorted(continuations(table, ("x", "y"))) == ["a", "a", "b"]
  # every created entry got at least one continuation
  assert all(len(entry) > 0 for _, entry in table.items())

def test_add_slides_window():
  builder = ChainBuilder()
  assert builder.window == (BOUNDARY, BOUNDARY)
  builder.add("one")
  assert builder.window == (BOUNDARY, "one")
  builder.add("two")
  assert builder.window == ("one", "two")

def test_builder_is_single_use():
  builder = ChainBuilder()
  builder.build(["a"])
  with pytest.raises(RuntimeError):
    builder.build(["b"])

def test_word_spelled_like_marker_is_a_real_word():
  table = build_table(["\n", "x"])
  assert continuations(table, (BOUNDARY, BOUNDARY)) == ["\n"]
  assert continuations(table, ("\n", "x")) == [BOUNDARY]

if __name__ == "__main__":
  pytest.main([__file__, "-v"])
