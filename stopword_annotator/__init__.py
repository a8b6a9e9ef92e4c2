# stopword_annotator/__init__.py
"""
Stop-token annotator for pre-tagged NLP pipelines.

Given tokens that already carry a surface word, lemma and part-of-speech tag,
marks each one as stopped or content-bearing according to a stopword list,
stop POS categories and minimum word/lemma lengths.

Public API:
- resolve_config(properties, prefix="stopwords") -> StopwordConfig
- decide(token, config) -> bool / stop_reason(token, config) -> StopReason | None
- StopwordsAnnotator(config).annotate(document)
- Pipeline.from_properties(properties).annotate(document)

Implementation lives in the submodules; this __init__ re-exports the stable API.
"""

from __future__ import annotations

from .annotator import (
    Annotator,
    StopwordsAnnotator,
    content_lemmas,
    content_tokens,
    is_stopped,
)
from .config import (
    ANNOTATOR_NAME,
    DEFAULT_STOP_POS_CATEGORIES,
    StopwordConfig,
    load_properties_file,
    load_properties_from_env,
    merge_properties,
    resolve_config,
)
from .engine import StopReason, decide, should_annotate, stop_reason
from .exceptions import (
    ConfigFileNotFound,
    InvalidBooleanConfig,
    InvalidConfigFile,
    InvalidNumericConfig,
    MissingRequirement,
    PipelineError,
    StopwordConfigError,
    StopwordFileNotFound,
    StopwordResourceNotFound,
    UnknownAnnotator,
)
from .pipeline import Pipeline, register_annotator
from .tokens import Document, Token, document_from_records

__all__ = [
    "ANNOTATOR_NAME",
    "DEFAULT_STOP_POS_CATEGORIES",
    "Annotator",
    "ConfigFileNotFound",
    "Document",
    "InvalidBooleanConfig",
    "InvalidConfigFile",
    "InvalidNumericConfig",
    "MissingRequirement",
    "Pipeline",
    "PipelineError",
    "StopReason",
    "StopwordConfig",
    "StopwordConfigError",
    "StopwordFileNotFound",
    "StopwordResourceNotFound",
    "StopwordsAnnotator",
    "Token",
    "UnknownAnnotator",
    "content_lemmas",
    "content_tokens",
    "decide",
    "document_from_records",
    "is_stopped",
    "load_properties_file",
    "load_properties_from_env",
    "merge_properties",
    "register_annotator",
    "resolve_config",
    "should_annotate",
    "stop_reason",
]

__version__ = "0.1.0"
