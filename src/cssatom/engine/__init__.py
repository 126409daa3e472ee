from cssatom.engine.atomizer import AtomizeResult, atomize, atomize_rules
from cssatom.engine.classify import RuleKind, classify, partition_selectors
from cssatom.engine.dedup import dedupe_last_occurrence, remove_identical_properties
from cssatom.engine.positions import strip_positions
from cssatom.engine.uglify import uglify_rules

__all__ = [
    "AtomizeResult",
    "atomize",
    "atomize_rules",
    "RuleKind",
    "classify",
    "partition_selectors",
    "dedupe_last_occurrence",
    "remove_identical_properties",
    "strip_positions",
    "uglify_rules",
]
