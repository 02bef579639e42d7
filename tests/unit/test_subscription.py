"""
Unit tests for Subscription and HandlerToken

Tests ordered dispatch, identity-based disposal and per-handler error isolation.
"""
import pytest
from unittest.mock import Mock

from hub_event_framework.core.subscription import HandlerToken, Subscription
from hub_event_framework.core.exceptions import HandlerError


class TestHandlerToken:
    """Test cases for HandlerToken"""

    def test_dispose_runs_action_once(self):
        action = Mock()
        token = HandlerToken(action)

        token.dispose()
        token.dispose()

        action.assert_called_once_with()
        assert token.disposed is True

    def test_context_manager_disposes(self):
        action = Mock()

        with HandlerToken(action) as token:
            assert token.disposed is False

        action.assert_called_once_with()


class TestSubscription:
    """Test cases for Subscription"""

    @pytest.fixture
    def subscription(self):
        return Subscription("chat")

    def test_handlers_fire_in_registration_order(self, subscription):
        calls = []
        subscription.add_received(lambda args: calls.append(("first", args)))
        subscription.add_received(lambda args: calls.append(("second", args)))

        subscription.on_received(["alice", 3])

        assert calls == [("first", ["alice", 3]), ("second", ["alice", 3])]

    def test_dispose_removes_only_its_record(self, subscription):
        handler = Mock()
        first = subscription.add_received(handler)
        subscription.add_received(handler)

        first.dispose()
        subscription.on_received([1])

        handler.assert_called_once_with([1])
        assert subscription.handler_count == 1

    def test_lists_are_independent(self, subscription):
        received = Mock()
        received_any = Mock()
        subscription.add_received(received)
        subscription.add_received_any(received_any)

        subscription.on_received([1])
        received_any.assert_not_called()

        subscription.on_received_any([2], "chat")
        received.assert_called_once_with([1])
        received_any.assert_called_once_with([2], "chat")

    def test_dispose_during_dispatch_skips_later_handler(self, subscription):
        later = Mock()
        tokens = {}

        def first(args):
            tokens["later"].dispose()

        subscription.add_received(first)
        tokens["later"] = subscription.add_received(later)
        sibling = Mock()
        subscription.add_received(sibling)

        subscription.on_received([1])

        later.assert_not_called()
        sibling.assert_called_once_with([1])

    def test_self_dispose_during_dispatch_does_not_skip_siblings(self, subscription):
        calls = []
        tokens = {}

        def once(args):
            calls.append("once")
            tokens["once"].dispose()

        tokens["once"] = subscription.add_received(once)
        subscription.add_received(lambda args: calls.append("always"))

        subscription.on_received([])
        subscription.on_received([])

        assert calls == ["once", "always", "always"]

    def test_single_failure_is_reraised_after_siblings(self, subscription):
        sibling = Mock()

        def failing(args):
            raise ValueError("boom")

        subscription.add_received(failing)
        subscription.add_received(sibling)

        with pytest.raises(ValueError, match="boom"):
            subscription.on_received([1])

        sibling.assert_called_once_with([1])

    def test_multiple_failures_are_aggregated(self, subscription):
        def failing(args):
            raise ValueError("boom")

        subscription.add_received(failing)
        subscription.add_received(failing)

        with pytest.raises(HandlerError) as exc_info:
            subscription.on_received([1])

        assert exc_info.value.event_name == "chat"
        assert len(exc_info.value.errors) == 2

    def test_without_isolation_first_failure_stops_dispatch(self):
        subscription = Subscription("chat", isolate_handler_errors=False)
        sibling = Mock()

        def failing(args):
            raise ValueError("boom")

        subscription.add_received(failing)
        subscription.add_received(sibling)

        with pytest.raises(ValueError):
            subscription.on_received([1])

        sibling.assert_not_called()

    def test_dispatch_copies_arguments(self, subscription):
        handler = Mock()
        subscription.add_received(handler)

        subscription.on_received(("a", "b"))

        handler.assert_called_once_with(["a", "b"])

    def test_handler_mutation_does_not_leak_to_siblings(self, subscription):
        sibling = Mock()
        subscription.add_received(lambda args: args.clear())
        subscription.add_received(sibling)

        subscription.on_received([1, 2])

        sibling.assert_called_once_with([1, 2])

    def test_received_any_handlers_get_their_own_arguments(self, subscription):
        sibling = Mock()
        subscription.add_received_any(lambda args, method: args.append("extra"))
        subscription.add_received_any(sibling)

        subscription.on_received_any(["x"], "chat")

        sibling.assert_called_once_with(["x"], "chat")
