# stopword_annotator/exceptions.py
"""
Shared exception classes used across the annotator.

Every configuration failure derives from StopwordConfigError so callers can
catch the whole family at pipeline setup, while the concrete classes keep the
stdlib bases (ValueError / OSError) that plain Python callers already expect.
"""

from __future__ import annotations


class StopwordConfigError(Exception):
    """
    Base class for failures while resolving a StopwordConfig.

    Raised once, at configuration-build time. Never raised while tokens are
    being annotated.
    """

    pass


class InvalidNumericConfig(StopwordConfigError, ValueError):
    """
    Raised when a length threshold is not a non-negative integer.

    Examples:
        - stopwords.shorterThan=three
        - stopwords.withLemmasShorterThan=-1
    """

    def __init__(self, key: str, raw: object) -> None:
        self.key = key
        self.raw = raw
        super().__init__(f"Property {key} must be a non-negative integer; got {raw!r}")


class InvalidBooleanConfig(StopwordConfigError, ValueError):
    """Raised when a flag is not one of true/false/yes/no/on/off/1/0."""

    def __init__(self, key: str, raw: object) -> None:
        self.key = key
        self.raw = raw
        super().__init__(f"Property {key} must be a boolean; got {raw!r}")


class StopwordFileNotFound(StopwordConfigError, OSError):
    """Raised when the stopword file path is missing or unreadable."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cannot read stop words file: {path}")


class StopwordResourceNotFound(StopwordConfigError, OSError):
    """Raised when a bundled stopword resource cannot be located."""

    def __init__(self, resource_path: str) -> None:
        self.resource_path = resource_path
        super().__init__(f"Cannot read stop words resources file: {resource_path}")


class ConfigFileNotFound(StopwordConfigError, OSError):
    """Raised when a YAML/.properties configuration file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cannot read configuration file: {path}")


class InvalidConfigFile(StopwordConfigError, ValueError):
    """
    Raised when a configuration file exists but cannot be used.

    Examples:
        - YAML syntax errors (unclosed brackets, bad indentation)
        - a YAML document whose top level is a list or scalar, not a mapping
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration file {path}: {reason}")


class PipelineError(Exception):
    """Base class for pipeline assembly failures."""

    pass


class MissingRequirement(PipelineError):
    """
    Raised when an annotator runs before the capabilities it requires.

    Example: the stopwords annotator placed before the lemmatizer.
    """

    def __init__(self, annotator: str, missing: set[str] | frozenset[str]) -> None:
        self.annotator = annotator
        self.missing = frozenset(missing)
        names = ", ".join(sorted(self.missing))
        super().__init__(f"Annotator {annotator!r} requires unsatisfied capabilities: {names}")


class UnknownAnnotator(PipelineError):
    """Raised when the annotators property names an unregistered annotator."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No annotator registered under name {name!r}")


__all__ = [
    "StopwordConfigError",
    "InvalidNumericConfig",
    "InvalidBooleanConfig",
    "StopwordFileNotFound",
    "StopwordResourceNotFound",
    "ConfigFileNotFound",
    "InvalidConfigFile",
    "PipelineError",
    "MissingRequirement",
    "UnknownAnnotator",
]
