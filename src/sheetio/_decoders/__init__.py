"""Container decoders: library cells to RawCell sheets."""
