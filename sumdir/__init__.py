"""sumdir - summarize the contents of a directory tree."""
