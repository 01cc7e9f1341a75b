# tests/cli_test/test_cli.py
"""
CLI tests — commands, command processor, parsing, undo and the REPL loop.
"""
import io

import pytest

from graph_reconciler.cli.commands import (
    AddEdgeCommand,
    DisableVertexCommand,
    EnableVertexCommand,
    HelpCommand,
    InfoCommand,
    ListCommand,
    RemoveEdgeCommand,
    SetTextCommand,
    ToggleVertexCommand,
    UndoCommand,
)
from graph_reconciler.cli.command_processor import CommandProcessor
from graph_reconciler.cli.repl import run
from graph_reconciler.core import ReconciliationEngine
from graph_reconciler.memory_renderer import InMemoryRenderer
from graph_reconciler.workspace import Workspace


# ── Helpers ──────────────────────────────────────────────────────

TRIANGLE = "a -> b\nb -> c\nc -> a\n"


@pytest.fixture
def processor(engine):
    return CommandProcessor(engine)


@pytest.fixture
def triangle_processor(engine):
    engine.set_text(TRIANGLE)
    return CommandProcessor(engine)


@pytest.fixture
def triangle():
    return Workspace(text=TRIANGLE)


# ═════════════════════════════════════════════════════════════════
#  COMMANDS
# ═════════════════════════════════════════════════════════════════

class TestCommands:

    def test_set_text_unescapes_newlines(self, triangle):
        result = SetTextCommand("x -> y\\ny -> z").execute(triangle)
        assert result.success
        assert triangle.text == "x -> y\ny -> z"
        assert result.request.text == "x -> y\ny -> z"

    def test_add_edge(self, triangle):
        result = AddEdgeCommand("c", "d").execute(triangle)
        assert result.success
        assert triangle.text.endswith("c -> d\n")

    @pytest.mark.parametrize("source, target", [("", "b"), ("a", " "), ("a->b", "c")])
    def test_add_edge_rejects_bad_endpoints(self, triangle, source, target):
        result = AddEdgeCommand(source, target).execute(triangle)
        assert not result.success
        assert result.request is None
        assert triangle.text == TRIANGLE

    def test_remove_missing_edge(self, triangle):
        result = RemoveEdgeCommand("x", "y").execute(triangle)
        assert not result.success
        assert "not found" in result.message

    def test_disable_unknown_vertex(self, triangle):
        result = DisableVertexCommand("zz").execute(triangle)
        assert not result.success
        assert triangle.disabled == frozenset()

    def test_disable_twice(self, triangle):
        DisableVertexCommand("a").execute(triangle)
        result = DisableVertexCommand("a").execute(triangle)
        assert not result.success
        assert "already disabled" in result.message

    def test_enable_not_disabled(self, triangle):
        assert not EnableVertexCommand("a").execute(triangle).success

    def test_toggle_reports_state(self, triangle):
        result = ToggleVertexCommand("b").execute(triangle)
        assert result.data == {"vertex": "b", "enabled": False}
        result = ToggleVertexCommand("b").execute(triangle)
        assert result.data == {"vertex": "b", "enabled": True}

    def test_undo_empty(self, triangle):
        result = UndoCommand().execute(triangle)
        assert not result.success
        assert result.message == "Nothing to undo."

    def test_info(self, triangle):
        triangle.disable("b")
        result = InfoCommand().execute(triangle)
        assert "3 edge line(s)" in result.message
        assert "visible: 2 node(s), 1 edge(s)" in result.message

    def test_list_marks_disabled_and_hidden(self, triangle):
        triangle.disable("b")
        message = ListCommand().execute(triangle).message
        assert "[ ] b" in message
        assert "[x] a" in message
        assert "a -> b  (hidden)" in message
        assert "  c -> a" in message.splitlines()

    def test_list_disabled(self, triangle):
        triangle.disable("c")
        message = ListCommand("disabled").execute(triangle).message
        assert message.splitlines() == ["── Disabled (1) ──", "  c"]

    def test_informational_commands_do_not_mutate(self):
        assert not InfoCommand().mutates
        assert not ListCommand().mutates
        assert not HelpCommand().mutates
        assert AddEdgeCommand("a", "b").mutates


# ═════════════════════════════════════════════════════════════════
#  COMMAND PROCESSOR
# ═════════════════════════════════════════════════════════════════

class TestCommandProcessor:

    def test_add_reconciles_renderer(self, processor, renderer):
        result = processor.process("add a b")
        assert result.success
        assert "[+2/-0 node(s), +1/-0 edge(s)]" in result.message
        assert renderer.edges == {"a -> b"}
        assert processor.vertex_list.vertices() == ["a", "b"]

    def test_add_with_arrow(self, processor, renderer):
        assert processor.process("add a -> b").success
        assert renderer.edges == {"a -> b"}

    def test_quoted_vertex_names(self, processor, renderer):
        processor.process('add "New York" Boston')
        assert renderer.edges == {"New York -> Boston"}

    def test_set_text(self, processor, renderer):
        result = processor.process("set 'a -> b\\nb -> c'")
        assert result.success
        assert renderer.edges == {"a -> b", "b -> c"}

    def test_disable_updates_renderer_and_vertex_list(self, triangle_processor, renderer):
        result = triangle_processor.process("disable b")
        assert result.success
        assert renderer.edges == {"c -> a"}
        assert renderer.nodes == {"a", "c"}
        assert triangle_processor.vertex_list.get("b").enabled is False
        assert result.data["diff"]["nodes_to_remove"] == ["b"]

    def test_disabled_vertex_stays_listed(self, triangle_processor):
        triangle_processor.process("disable b")
        assert "b" in triangle_processor.vertex_list

    def test_undo_restores_renderer(self, triangle_processor, renderer):
        triangle_processor.process("remove c a")
        assert "c -> a" not in renderer.edges
        triangle_processor.process("undo")
        assert renderer.edges == {"a -> b", "b -> c", "c -> a"}

    def test_clear_removes_vertices_from_list(self, triangle_processor, renderer):
        triangle_processor.process("clear")
        assert renderer.nodes == set()
        assert len(triangle_processor.vertex_list) == 0

    def test_refresh_without_changes(self, triangle_processor):
        result = triangle_processor.process("refresh")
        assert result.message == "Refreshing."
        assert result.data["diff"]["nodes_to_add"] == []

    def test_inline_comment(self, processor, renderer):
        assert processor.process("add a b   # first edge").success
        assert renderer.edges == {"a -> b"}

    def test_renderer_failure_in_message(self, processor, renderer):
        renderer.fail_on("add")
        result = processor.process("add a b")
        assert result.success
        assert "(renderer update failed: add failed)" in result.message

    def test_not_ready_renderer_queues(self, scheduler):
        renderer = InMemoryRenderer(ready=False)
        engine = ReconciliationEngine(renderer, scheduler=scheduler, workspace=Workspace(text=""))
        engine.start()
        result = CommandProcessor(engine).process("add a b")
        assert result.message.endswith("(renderer not ready, update queued)")
        assert engine.pending_request is not None

    @pytest.mark.parametrize("text, expected", [
        ("", "Empty command"),
        ("   # only a comment", "Empty command"),
        ("frobnicate", "Unknown command"),
        ("add a", "Usage: add"),
        ("add a -> ", "Usage: add"),
        ("disable", "Usage: disable"),
        ("toggle a b", "Usage: toggle"),
        ("list nodes", "Unknown list target"),
    ])
    def test_rejected_input(self, processor, text, expected):
        result = processor.process(text)
        assert not result.success
        assert expected in result.message

    def test_help(self, processor):
        result = processor.process("help")
        assert result.success
        assert "Available commands" in result.message

    def test_case_insensitive_verb(self, processor, renderer):
        assert processor.process("ADD a b").success
        assert renderer.edges == {"a -> b"}


# ═════════════════════════════════════════════════════════════════
#  REPL
# ═════════════════════════════════════════════════════════════════

class TestRepl:

    def test_session(self):
        stdin = io.StringIO("clear\nadd a b\n\nquit\n")
        stdout = io.StringIO()

        assert run(stdin, stdout) == 0

        output = stdout.getvalue()
        assert "InMemoryRenderer(nodes=100, edges=100)" in output
        assert "Graph cleared." in output
        assert "InMemoryRenderer(nodes=0, edges=0)" in output
        assert "Edge added: a -> b." in output
        assert "InMemoryRenderer(nodes=2, edges=1)" in output

    def test_eof_ends_session(self):
        assert run(io.StringIO(""), io.StringIO()) == 0
