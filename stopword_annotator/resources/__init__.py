"""Stopword lists bundled with the annotator (read via importlib.resources)."""
