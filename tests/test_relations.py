"""Tests for the support/attack relation graph."""

import pytest

from argdown_analyzer.analysis import ArgdownAnalyzer
from argdown_analyzer.model import Argument, EquivalenceClass, RelationType
from argdown_analyzer.tree.builders import (
    argument_definition,
    argument_reference,
    argument_statement,
    document,
    incoming_attack,
    incoming_support,
    outgoing_attack,
    outgoing_support,
    reconstruction,
    relations,
    statement,
    statement_definition,
    statement_reference,
)


def ref(title):
    return statement(statement_reference(title))


def assert_relations_complete(result):
    for node in [*result.statements.values(), *result.arguments.values()]:
        for relation in node.relations:
            assert relation.from_ is not None
            assert relation.to is not None
            assert any(r is relation for r in relation.from_.relations)
            assert any(r is relation for r in relation.to.relations)


class TestPolarity:
    """Incoming relations fix `from_` to the enclosing node, outgoing ones fix `to`."""

    @pytest.mark.parametrize(
        "builder, relation_type",
        [
            (incoming_support, RelationType.SUPPORT),
            (incoming_attack, RelationType.ATTACK),
        ],
    )
    def test_incoming_starts_at_enclosing_statement(self, builder, relation_type):
        """Incoming relations start at the enclosing statement."""
        doc = document(statement(statement_definition("A"), "a", relations(builder(ref("B")))))

        result = ArgdownAnalyzer().run(doc)

        (relation,) = result.statements["A"].relations
        assert relation.type == relation_type
        assert relation.from_ is result.statements["A"]
        assert relation.to is result.statements["B"]

    @pytest.mark.parametrize(
        "builder, relation_type",
        [
            (outgoing_support, RelationType.SUPPORT),
            (outgoing_attack, RelationType.ATTACK),
        ],
    )
    def test_outgoing_ends_at_enclosing_statement(self, builder, relation_type):
        """Outgoing relations end at the enclosing statement."""
        doc = document(statement(statement_definition("A"), "a", relations(builder(ref("B")))))

        result = ArgdownAnalyzer().run(doc)

        (relation,) = result.statements["A"].relations
        assert relation.type == relation_type
        assert relation.from_ is result.statements["B"]
        assert relation.to is result.statements["A"]


class TestRelationGraph:
    def test_relation_registered_on_both_endpoints(self):
        """A relation is listed on both of its endpoints."""
        content = incoming_support(ref("B"))
        doc = document(statement(statement_definition("A"), relations(content)))

        result = ArgdownAnalyzer().run(doc)

        relation = content.relation
        assert result.statements["A"].relations == [relation]
        assert result.statements["B"].relations == [relation]
        assert result.stats.relations == 1

    def test_parallel_edges_are_kept(self):
        """Repeated relations between the same nodes are all kept."""
        doc = document(
            statement(
                statement_definition("A"),
                relations(incoming_support(ref("B")), incoming_support(ref("B"))),
            )
        )

        result = ArgdownAnalyzer().run(doc)

        first, second = result.statements["A"].relations
        assert first is not second
        assert len(result.statements["B"].relations) == 2
        assert len(list(result.relations())) == 2

    def test_repeated_claims_share_relations(self):
        """Relations of repeated claims collect on one class."""
        doc = document(
            statement(statement_definition("A"), relations(incoming_support(ref("B")))),
            statement(statement_reference("A"), relations(incoming_attack(ref("C")))),
        )

        result = ArgdownAnalyzer().run(doc)

        types = [r.type for r in result.statements["A"].relations]
        assert types == [RelationType.SUPPORT, RelationType.ATTACK]

    def test_nested_relations_attach_to_enclosing_statement(self):
        """Relations after a nested block still attach to the outer statement."""
        doc = document(
            statement(
                statement_definition("A"),
                relations(
                    incoming_support(
                        statement(
                            statement_reference("B"),
                            relations(incoming_attack(ref("C"))),
                        )
                    ),
                    incoming_support(ref("D")),
                ),
            )
        )

        result = ArgdownAnalyzer().run(doc)

        edges = {(r.from_.title, r.to.title, r.type) for r in result.relations()}
        assert edges == {
            ("A", "B", RelationType.SUPPORT),
            ("B", "C", RelationType.ATTACK),
            ("A", "D", RelationType.SUPPORT),
        }
        assert_relations_complete(result)

    def test_untitled_statement_titled_before_relations(self):
        """An untitled statement is titled before its relations attach."""
        doc = document(statement("anonymous claim", relations(incoming_support(ref("B")))))

        result = ArgdownAnalyzer().run(doc)

        anonymous = result.statements["Untitled 1"]
        assert anonymous.members[0].text == "anonymous claim"
        assert anonymous.relations[0].to is result.statements["B"]
        assert result.stats.generated_titles == 1

    def test_reconstructed_statement_relations(self):
        """Statements inside reconstructions can carry relations."""
        block = reconstruction(
            argument_statement(
                1,
                statement(statement_reference("P"), relations(outgoing_attack(ref("X")))),
            ),
            argument_statement(2, ref("Q")),
        )

        result = ArgdownAnalyzer().run(document(block))

        (relation,) = result.statements["P"].relations
        assert relation.from_ is result.statements["X"]
        assert relation.to is result.statements["P"]
        assert result.statements["Q"].relations == []


class TestArgumentEndpoints:
    def test_argument_as_enclosing_node(self):
        """An argument definition anchors its relations."""
        doc = document(argument_definition("A", "desc", relations(outgoing_support(ref("T")))))

        result = ArgdownAnalyzer().run(doc)

        (relation,) = result.arguments["A"].relations
        assert isinstance(relation.to, Argument)
        assert relation.from_ is result.statements["T"]

    def test_argument_as_relation_content(self):
        """An argument reference can be a relation endpoint."""
        doc = document(statement(statement_definition("T"), relations(incoming_attack(argument_reference("B")))))

        result = ArgdownAnalyzer().run(doc)

        (relation,) = result.statements["T"].relations
        assert isinstance(relation.from_, EquivalenceClass)
        assert relation.to is result.arguments["B"]
        assert result.arguments["B"].relations == [relation]

    def test_existing_argument_as_enclosing_node(self):
        """A reference to a known argument anchors relations too."""
        doc = document(
            argument_definition("A", "desc"),
            argument_reference("A", relations(incoming_support(ref("S")))),
        )

        result = ArgdownAnalyzer().run(doc)

        (relation,) = result.arguments["A"].relations
        assert relation.from_ is result.arguments["A"]


class TestUnresolvedEndpoints:
    def test_relation_without_enclosing_node_is_dropped(self):
        """A relation with no enclosing node is dropped."""
        doc = document(relations(incoming_support(ref("B"))))

        result = ArgdownAnalyzer().run(doc)

        assert result.statements["B"].relations == []
        assert list(result.relations()) == []
        assert result.stats.relations == 0

    def test_attachment_stack_empty_after_run(self):
        """Every relations block pops its attachment target."""
        analyzer = ArgdownAnalyzer()
        analyzer.run(document(statement(statement_definition("A"), relations(incoming_support(ref("B"))))))

        assert analyzer.context.attachment_stack == []
        assert analyzer.context.current_relation is None


def test_cyclic_graph_serializes():
    """Cycles serialize because endpoints are referenced by title."""
    doc = document(
        statement(statement_definition("A"), relations(incoming_support(ref("B")))),
        statement(statement_definition("B"), relations(incoming_attack(ref("A")))),
    )

    result = ArgdownAnalyzer().run(doc)

    data = result.statements["A"].to_dict()
    assert data["relations"][0] == {
        "type": "support",
        "from": {"title": "A", "kind": "statement"},
        "to": {"title": "B", "kind": "statement"},
    }
