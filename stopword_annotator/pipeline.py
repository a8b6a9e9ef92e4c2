"""
Just enough orchestration to plug the stopwords annotator into a chain.

Tokenization, tagging and lemmatization are done elsewhere; their output is
handed in as a pre-annotated Document whose `satisfied` set names what has
already run. The pipeline only checks declared requirements and runs the
configured annotators in order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .annotator import Annotator, StopwordsAnnotator
from .config import ANNOTATOR_NAME
from .exceptions import MissingRequirement, UnknownAnnotator
from .sources import split_csv
from .tokens import Document

log = logging.getLogger(__name__)

AnnotatorFactory = Callable[[str, Mapping[str, Any]], Annotator]

_REGISTRY: dict[str, AnnotatorFactory] = {
    ANNOTATOR_NAME: lambda name, props: StopwordsAnnotator.from_properties(props, name=name),
}


def register_annotator(name: str, factory: AnnotatorFactory) -> None:
    """Make `factory(name, properties)` available to Pipeline.from_properties."""
    _REGISTRY[name] = factory


def registered_annotators() -> list[str]:
    return sorted(_REGISTRY)


class Pipeline:
    def __init__(self, annotators: Iterable[Annotator]) -> None:
        self.annotators = list(annotators)

    @classmethod
    def from_properties(
        cls,
        properties: Mapping[str, Any],
        skip: Iterable[str] = (),
    ) -> Pipeline:
        """
        Build the chain named by the "annotators" property, e.g.
        "tokenize, ssplit, pos, lemma, stopwords".

        Names listed in `skip` are treated as already run upstream (they are
        not instantiated here).
        """
        skipped = set(skip)
        annotators: list[Annotator] = []
        for name in split_csv(str(properties.get("annotators", ""))):
            if name in skipped:
                continue
            factory = _REGISTRY.get(name)
            if factory is None:
                raise UnknownAnnotator(name)
            annotators.append(factory(name, properties))
        return cls(annotators)

    def annotate(self, document: Document) -> Document:
        satisfied = set(document.satisfied)
        for annotator in self.annotators:
            missing = annotator.requires() - satisfied
            if missing:
                raise MissingRequirement(annotator.name, missing)
            annotator.annotate(document)
            satisfied |= annotator.requirements_satisfied()
            log.debug("Ran annotator %s", annotator.name)
        document.satisfied = satisfied
        return document


__all__ = ["AnnotatorFactory", "Pipeline", "register_annotator", "registered_annotators"]
