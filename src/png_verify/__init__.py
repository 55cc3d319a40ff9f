"""PNG verify - structural integrity checks for PNG files."""
