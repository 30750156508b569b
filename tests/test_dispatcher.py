"""Tests for the traversal dispatcher and handler registry."""

import json

import pytest

from argdown_analyzer.analysis import (
    AnalyzerConfig,
    ArgdownAnalyzer,
    Phase,
    get_handler,
    handler,
    list_registered_handlers,
)
from argdown_analyzer.tree import NodeKind
from argdown_analyzer.tree.builders import (
    bold,
    document,
    heading,
    statement,
    statement_definition,
)

EXPECTED_HANDLERS = {
    (NodeKind.DOCUMENT_ROOT, Phase.ENTRY),
    (NodeKind.HEADING, Phase.EXIT),
    (NodeKind.STATEMENT, Phase.ENTRY),
    (NodeKind.STATEMENT, Phase.EXIT),
    (NodeKind.STATEMENT_DEFINITION, Phase.ENTRY),
    (NodeKind.STATEMENT_REFERENCE, Phase.ENTRY),
    (NodeKind.STATEMENT_MENTION, Phase.EXIT),
    (NodeKind.ARGUMENT_MENTION, Phase.EXIT),
    (NodeKind.ARGUMENT_DEFINITION, Phase.ENTRY),
    (NodeKind.ARGUMENT_DEFINITION, Phase.EXIT),
    (NodeKind.ARGUMENT_REFERENCE, Phase.ENTRY),
    (NodeKind.ARGUMENT_REFERENCE, Phase.EXIT),
    (NodeKind.ARGUMENT, Phase.ENTRY),
    (NodeKind.ARGUMENT_STATEMENT, Phase.EXIT),
    (NodeKind.INFERENCE, Phase.ENTRY),
    (NodeKind.INFERENCE_RULES, Phase.EXIT),
    (NodeKind.METADATA_STATEMENT, Phase.EXIT),
    (NodeKind.RELATIONS, Phase.ENTRY),
    (NodeKind.RELATIONS, Phase.EXIT),
    (NodeKind.INCOMING_SUPPORT, Phase.ENTRY),
    (NodeKind.INCOMING_SUPPORT, Phase.EXIT),
    (NodeKind.INCOMING_ATTACK, Phase.ENTRY),
    (NodeKind.INCOMING_ATTACK, Phase.EXIT),
    (NodeKind.OUTGOING_SUPPORT, Phase.ENTRY),
    (NodeKind.OUTGOING_SUPPORT, Phase.EXIT),
    (NodeKind.OUTGOING_ATTACK, Phase.ENTRY),
    (NodeKind.OUTGOING_ATTACK, Phase.EXIT),
    (NodeKind.FREESTYLE_TEXT, Phase.ENTRY),
    (NodeKind.BOLD, Phase.ENTRY),
    (NodeKind.BOLD, Phase.EXIT),
    (NodeKind.ITALIC, Phase.ENTRY),
    (NodeKind.ITALIC, Phase.EXIT),
    (NodeKind.LINK, Phase.ENTRY),
}


class TestRegistry:
    def test_handler_table(self):
        """Every expected (kind, phase) pair has exactly one handler."""
        assert set(list_registered_handlers()) == EXPECTED_HANDLERS

    @pytest.mark.parametrize(
        "kind, phase",
        [
            (NodeKind.TOKEN, Phase.ENTRY),
            (NodeKind.EMPTY_LINE, Phase.EXIT),
            (NodeKind.DOCUMENT_ROOT, Phase.EXIT),
        ],
    )
    def test_unregistered_pairs(self, kind, phase):
        """Pairs without a handler are no-ops."""
        assert get_handler(kind, phase) is None

    def test_duplicate_registration_rejected(self):
        """Registering a second handler for a pair raises."""
        before = get_handler(NodeKind.STATEMENT, Phase.ENTRY)

        with pytest.raises(ValueError):
            handler(NodeKind.STATEMENT, phase=Phase.ENTRY)(lambda ctx, visit: None)

        assert get_handler(NodeKind.STATEMENT, Phase.ENTRY) is before


class TestTraversal:
    def test_handlers_fire_in_depth_first_order(self):
        """Handlers run in depth-first pre/post order."""
        doc = document(statement(statement_definition("A"), bold("x")))
        analyzer = ArgdownAnalyzer(AnalyzerConfig(include_trace=True))

        result = analyzer.run(doc)

        order = [(e.kind, e.phase) for e in result.trace]
        assert order == [
            ("documentRoot", "entry"),
            ("statement", "entry"),
            ("statementDefinition", "entry"),
            ("bold", "entry"),
            ("freestyleText", "entry"),
            ("bold", "exit"),
            ("statement", "exit"),
        ]

    def test_stats(self):
        """Run statistics count visited nodes and handler calls."""
        doc = document(statement("a"), statement("b"))

        result = ArgdownAnalyzer().run(doc)

        # root + 2 statements + 2 freestyle + 2 tokens
        assert result.stats.nodes_visited == 7
        assert result.stats.handler_calls == 7
        assert result.stats.generated_titles == 2
        assert result.trace == []

    def test_runs_do_not_share_state(self):
        """Consecutive runs start from a fresh context."""
        analyzer = ArgdownAnalyzer()

        first = analyzer.run(document(statement("one")))
        second = analyzer.run(document(statement("two")))

        assert list(first.statements) == ["Untitled 1"]
        assert list(second.statements) == ["Untitled 1"]
        assert first.statements["Untitled 1"] is not second.statements["Untitled 1"]
        assert second.statements["Untitled 1"].members[0].text == "two"

    def test_external_driver(self):
        """A parser can drive the analyzer node by node."""
        analyzer = ArgdownAnalyzer()
        doc = document(statement(statement_definition("A"), "text"))

        def drive(node, parent=None, index=0):
            analyzer.enter(node, parent, index)
            for child_index, child in enumerate(node.children):
                drive(child, node, child_index)
            analyzer.exit(node, parent, index)

        drive(doc)

        assert analyzer.context.statements["A"].members[0].text == "text"

    def test_external_driver_returns_result_per_document(self):
        """Each driven document gets fresh counters and its own result."""
        analyzer = ArgdownAnalyzer(AnalyzerConfig(include_trace=True))

        def drive(node, parent=None, index=0):
            analyzer.enter(node, parent, index)
            for child_index, child in enumerate(node.children):
                drive(child, node, child_index)
            return analyzer.exit(node, parent, index)

        first = drive(document(statement("a")))
        second = drive(document(statement("b")))

        assert first.stats.nodes_visited == 4
        assert second.stats.nodes_visited == 4
        assert second.stats.handler_calls == first.stats.handler_calls
        assert len(second.trace) == second.stats.handler_calls
        assert list(second.statements) == ["Untitled 1"]
        assert second.statements["Untitled 1"].members[0].text == "b"
        assert analyzer.nodes_visited == 4

    def test_exit_of_inner_node_returns_nothing(self):
        """Only the document root exit hands back a result."""
        analyzer = ArgdownAnalyzer()
        doc = document(statement("a"))
        analyzer.enter(doc)
        stmt = doc.children[0]
        analyzer.enter(stmt, doc, 0)

        assert analyzer.exit(stmt, doc, 0) is None
        assert analyzer.exit(doc) is not None

    def test_document_entry_resets_context(self):
        """Walking a second document discards the first."""
        analyzer = ArgdownAnalyzer()
        analyzer.walk(document(statement("first")))
        analyzer.walk(document(statement("second")))

        assert list(analyzer.context.statements) == ["Untitled 1"]
        assert analyzer.context.statements["Untitled 1"].members[0].text == "second"

    def test_custom_untitled_prefix(self):
        """The configured prefix names generated titles."""
        result = ArgdownAnalyzer(AnalyzerConfig(untitled_prefix="Anon")).run(document(statement("x")))

        assert list(result.statements) == ["Anon 1"]


class TestHeading:
    def test_heading_level_and_text(self):
        """Heading nodes receive their level and text."""
        node = heading(2, "Free will")

        ArgdownAnalyzer().run(document(node))

        assert node.heading == 2
        assert node.text == "Free will"


class TestTrace:
    def test_trace_filters_and_export(self):
        """Trace events can be filtered and exported as JSON."""
        analyzer = ArgdownAnalyzer(AnalyzerConfig(include_trace=True))
        analyzer.run(document(statement("a"), statement("b")))

        statement_events = analyzer.trace.filter_by_kind("statement")
        assert len(statement_events) == 4
        assert {e.handler for e in statement_events} == {"on_statement_entry", "on_statement_exit"}
        assert len(analyzer.trace.filter_by_type("HANDLER_INVOKED")) == 7

        exported = json.loads(analyzer.trace.export_json())
        assert exported[0]["kind"] == "documentRoot"
