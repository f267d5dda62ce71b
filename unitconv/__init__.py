"""unitconv: byte quantity parsing, radix conversion and human-readable sizes."""
