"""Document model produced by the semantic analysis pass."""

from .range import Range, RangeType
from .statement import Inference, Statement, StatementRole
from .equivalence_class import EquivalenceClass
from .argument import Argument
from .relation import Relation, RelationBuilder, RelationSide, RelationType

__all__ = [
    "Range",
    "RangeType",
    "Inference",
    "Statement",
    "StatementRole",
    "EquivalenceClass",
    "Argument",
    "Relation",
    "RelationBuilder",
    "RelationSide",
    "RelationType",
]
