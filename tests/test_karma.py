"""Tests for karma line assembly and the emitter capability."""

from karmalog.aliases import AliasTable
from karmalog.karma import KarmaEmitter, KarmaRenderer
from karmalog.models import FeedTarget


class TestRenderKarmaMessage:
    def setup_method(self):
        self.renderer = KarmaRenderer(AliasTable({"wcoleda": "coke"}))

    def test_bare_message(self):
        lines = self.renderer.render_karma_message(
            feed="proj", rev="r5", user="alice", log_lines=[], link=None, prefix=None
        )
        assert lines == ["proj: r5 | alice++ | /"]

    def test_full_message(self):
        lines = self.renderer.render_karma_message(
            feed="partcl",
            rev="r42",
            user="wcoleda",
            log_lines=["first line", "second line"],
            link="http://example.com/r42",
            prefix="trunk/src/ (2 files)",
        )
        assert lines == [
            "partcl: r42 | coke++ | trunk/src/ (2 files):",
            "partcl: first line",
            "partcl: second line",
            "partcl: review: http://example.com/r42",
        ]

    def test_link_alone_adds_colon(self):
        lines = self.renderer.render_karma_message("p", "r1", "bob", [], "http://x/", None)
        assert lines == ["p: r1 | bob++ | /:", "p: review: http://x/"]

    def test_log_alone_adds_colon(self):
        lines = self.renderer.render_karma_message("p", "r1", "bob", ["msg"], None, "src")
        assert lines == ["p: r1 | bob++ | src:", "p: msg"]

    def test_empty_prefix_is_kept(self):
        lines = self.renderer.render_karma_message("p", "r1", "bob", [], None, "")
        assert lines == ["p: r1 | bob++ | "]

    def test_user_with_space_is_wrapped(self):
        lines = self.renderer.render_karma_message("p", "r1", "Foo Bar")
        assert lines == ["p: r1 | (Foo Bar)++ | /"]

    def test_missing_user(self):
        lines = self.renderer.render_karma_message("p", "r1", None)
        assert lines == ["p: r1 | unknown++ | /"]


class TestKarmaEmitter:
    def test_emit_karma_message_puts_to_targets(self, aliases, sink):
        emitter = KarmaEmitter(aliases, sink)
        targets = [FeedTarget("magnet", "#parrot")]
        emitter.emit_karma_message(targets, feed="p", rev="r1", user="wcoleda")
        sink.put.assert_called_once_with(targets, ["p: r1 | coke++ | /"])

    def test_emit_ticket_karma_puts_to_targets(self, aliases, sink):
        emitter = KarmaEmitter(aliases, sink)
        targets = [FeedTarget("magnet", "#parrot"), FeedTarget("freenode", "#perl6")]
        emitter.emit_ticket_karma(targets, ticket=1, user="wcoleda", action="opened")
        sink.put.assert_called_once_with(targets, ["Ticket #1 opened by coke++: "])
