"""Strong's Reader - tagged scripture tokenization and lexicon lookup."""

__version__ = "0.1.0"
