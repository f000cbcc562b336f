"""Application workflows orchestrating the parsing engine and runtime services."""
