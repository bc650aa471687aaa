"""Merge annotations from independent detectors into one non-overlapping list."""

from __future__ import annotations

from collections.abc import Iterable

from .facets import Annotation


def resolve_overlaps(annotations: Iterable[Annotation]) -> list[Annotation]:
    """Keep the first annotation at each position, dropping any that intersect it.

    The sort is stable, so among annotations starting at the same byte the one
    that came first in the input (the earlier detector) wins. Kept
    annotations are sorted and pairwise disjoint, which means only the last
    kept one can collide with the next candidate.
    """
    kept: list[Annotation] = []
    for annotation in sorted(annotations, key=lambda a: a.byte_start):
        if kept and annotation.byte_start < kept[-1].byte_end:
            continue
        kept.append(annotation)
    return kept
