"""Reader-side queries over tokenized verses."""
