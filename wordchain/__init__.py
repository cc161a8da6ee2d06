from .trainer import MarkovTrainer
from .utils.table import BOUNDARY, NPREF, HASHSIZE, ModelEntry, PrefixTable
from .utils.builder import ChainBuilder, build_table
from .utils.generator import generate, render
from .utils.tokens import read_words, split_words
