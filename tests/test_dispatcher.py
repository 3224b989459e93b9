"""
Tests for dispatcher.py module
"""

import pytest

from tinyirc.dispatcher import Binding, Dispatcher, LineContext, binding_table, tokenize


class Recorder:
    """Handler factory recording (name, line, context) per call"""

    def __init__(self):
        self.calls = []

    def handler(self, name):
        def _handler(connection, line, context):
            self.calls.append((name, line, context))

        _handler.__name__ = name
        return _handler


class TestTokenize:
    def test_simple_split(self):
        assert tokenize("PING :abc") == ("PING", ":abc")

    def test_consecutive_spaces_are_dropped(self):
        assert tokenize("a  b   c") == ("a", "b", "c")

    def test_leading_and_trailing_spaces_are_dropped(self):
        assert tokenize(" PING :x ") == ("PING", ":x")

    def test_trailing_parameter_is_not_special(self):
        assert tokenize(":n!u@h PRIVMSG bob :hey man") == (
            ":n!u@h",
            "PRIVMSG",
            "bob",
            ":hey",
            "man",
        )

    def test_empty_line(self):
        assert tokenize("") == ()

    def test_tabs_are_not_separators(self):
        assert tokenize("a\tb c") == ("a\tb", "c")


class TestBinding:
    def test_binding_is_immutable(self):
        binding = Binding(0, "PING", lambda c, l, ctx: None)
        with pytest.raises(AttributeError):
            binding.position = 1

    def test_negative_position_rejected(self):
        with pytest.raises(ValueError):
            Binding(-1, "PING", lambda c, l, ctx: None)

    @pytest.mark.parametrize("match", ["", "TWO WORDS"])
    def test_invalid_match_rejected(self, match):
        with pytest.raises(ValueError):
            Binding(0, match, lambda c, l, ctx: None)

    def test_binding_table_accepts_triples(self):
        handler = lambda c, l, ctx: None  # noqa: E731
        table = binding_table((0, "PING", handler), Binding(1, "376", handler))
        assert isinstance(table, tuple)
        assert table[0] == Binding(0, "PING", handler)
        assert table[1].match == "376"


class TestDispatcher:
    @pytest.fixture
    def recorder(self):
        return Recorder()

    def test_binding_fires_on_matching_position(self, recorder, fake_connection):
        disp = Dispatcher([Binding(0, "PING", recorder.handler("ping"))])
        fired = disp.dispatch(fake_connection, "PING :abc")
        assert fired == 1
        assert recorder.calls[0][0] == "ping"
        assert recorder.calls[0][1] == "PING :abc"

    def test_binding_does_not_fire_at_other_position(self, recorder, fake_connection):
        disp = Dispatcher([Binding(0, "PRIVMSG", recorder.handler("privmsg"))])
        fired = disp.dispatch(fake_connection, ":a!b@c PRIVMSG bob :hi")
        assert fired == 0
        assert recorder.calls == []

    def test_match_is_case_sensitive(self, recorder, fake_connection):
        disp = Dispatcher([Binding(0, "PING", recorder.handler("ping"))])
        assert disp.dispatch(fake_connection, "ping :abc") == 0

    def test_match_is_exact(self, recorder, fake_connection):
        disp = Dispatcher([Binding(0, "PING", recorder.handler("ping"))])
        assert disp.dispatch(fake_connection, "PINGS :abc") == 0

    def test_full_line_passed_to_handler(self, recorder, fake_connection):
        disp = Dispatcher([Binding(2, "bob", recorder.handler("target"))])
        line = ":a!b@c PRIVMSG bob :hey there"
        disp.dispatch(fake_connection, line)
        assert recorder.calls[0][1] == line

    def test_multiple_bindings_fire_for_one_line(self, recorder, fake_connection):
        disp = Dispatcher(
            [
                Binding(1, "PRIVMSG", recorder.handler("privmsg")),
                Binding(2, "#bots", recorder.handler("channel")),
                Binding(1, "PRIVMSG", recorder.handler("audit")),
            ]
        )
        fired = disp.dispatch(fake_connection, ":a!b@c PRIVMSG #bots :hi")
        assert fired == 3
        assert [name for name, _, _ in recorder.calls] == ["privmsg", "audit", "channel"]

    def test_binding_fires_once_per_line(self, recorder, fake_connection):
        disp = Dispatcher([Binding(1, "x", recorder.handler("x"))])
        assert disp.dispatch(fake_connection, "x x x x") == 1

    def test_order_follows_token_position_then_table(self, recorder, fake_connection):
        disp = Dispatcher(
            [
                Binding(1, "b", recorder.handler("second")),
                Binding(0, "a", recorder.handler("first")),
            ]
        )
        disp.dispatch(fake_connection, "a b")
        assert [name for name, _, _ in recorder.calls] == ["first", "second"]

    def test_empty_tokens_do_not_shift_positions(self, recorder, fake_connection):
        disp = Dispatcher([Binding(1, "PRIVMSG", recorder.handler("privmsg"))])
        assert disp.dispatch(fake_connection, ":a!b@c   PRIVMSG bob :hi") == 1

    def test_context_carries_state_between_positions(self, fake_connection, config):
        seen = []

        def mark_admin(connection, line, context):
            context.state["admin"] = line.startswith(":root!")

        def command(connection, line, context):
            seen.append(context.state.get("admin"))

        disp = Dispatcher(
            [Binding(0, ":root!r@h", mark_admin), Binding(1, "PRIVMSG", command)],
            config,
        )
        disp.dispatch(fake_connection, ":root!r@h PRIVMSG #bots :!op")
        disp.dispatch(fake_connection, ":eve!e@h PRIVMSG #bots :!op")
        assert seen == [True, None]

    def test_context_contents(self, recorder, fake_connection, config):
        disp = Dispatcher([Binding(0, "PING", recorder.handler("ping"))], config)
        disp.dispatch(fake_connection, "PING :abc")
        context = recorder.calls[0][2]
        assert isinstance(context, LineContext)
        assert context.connection is fake_connection
        assert context.tokens == ("PING", ":abc")
        assert context.config is config
        assert context.state == {}

    def test_failing_handler_does_not_stop_others(self, recorder, fake_connection, events):
        def broken(connection, line, context):
            raise RuntimeError("boom")

        disp = Dispatcher(
            [
                Binding(0, "PING", broken),
                Binding(0, "PING", recorder.handler("after")),
            ]
        )
        fired = disp.dispatch(fake_connection, "PING :abc")
        assert fired == 2
        assert [name for name, _, _ in recorder.calls] == ["after"]
        errors = [kw for d, a, kw in events if (d, a) == ("dispatch", "handler_error")]
        assert errors[0]["handler"] == "broken"
        assert errors[0]["error_type"] == "RuntimeError"

    def test_unmatched_line_logged(self, fake_connection, events):
        Dispatcher([]).dispatch(fake_connection, "NOTICE * :hi")
        assert ("dispatch", "unhandled") in [(d, a) for d, a, _ in events]

    def test_bindings_are_frozen_into_tuple(self, recorder):
        bindings = [Binding(0, "PING", recorder.handler("ping"))]
        disp = Dispatcher(bindings)
        bindings.append(Binding(0, "X", recorder.handler("x")))
        assert len(disp.bindings) == 1
