"""RowGram: crew lineup image generator."""
