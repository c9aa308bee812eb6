from __future__ import annotations

import copy
from datetime import timedelta

import pytest

from cartflow import flow as F
from cartflow.errors import CartChangedError, ErrorKind, RequestError
from cartflow.order import OrderActionCreator, OrderActionType as O
from cartflow.transport import RequestOptions, TransportError
from tests.conftest import FakeCheckoutClient, failure_response, unwrap, unwrap_err

PAYLOAD = {"payment": {"method_id": "authorizenet"}, "use_store_credit": False}


def types(actions) -> list[str]:
    return [a.type for a in actions]


class TestSubmitOrder:
    async def test_without_cart_submits_unconditionally(self, checkout_client):
        creator = OrderActionCreator(checkout_client)

        actions = unwrap(await F.collect(creator.submit_order(PAYLOAD)))

        assert checkout_client.calls == ["submit_order"]
        assert types(actions) == [O.SUBMIT_ORDER_REQUESTED, O.SUBMIT_ORDER_SUCCEEDED]

    async def test_success_carries_data_and_token(self, checkout_client, cart):
        creator = OrderActionCreator(checkout_client)

        actions = unwrap(await F.collect(creator.submit_order(PAYLOAD, cart)))

        succeeded = actions[-1]
        assert succeeded.payload == {"order": {"order_id": 295}}
        assert succeeded.meta == {"device_fingerprint": "abc", "token": "order-token"}

    async def test_missing_token_header(self, cart):
        client = FakeCheckoutClient(cart=cart, token=None)

        actions = unwrap(await F.collect(OrderActionCreator(client).submit_order(PAYLOAD)))

        assert actions[-1].meta["token"] is None

    async def test_matching_cart_is_submitted(self, checkout_client, cart):
        """Item order and updated_time do not count as changes."""
        known = copy.deepcopy(cart)
        known["items"].reverse()
        known["updated_time"] = "2024-04-30T09:00:00Z"

        unwrap(await F.collect(OrderActionCreator(checkout_client).submit_order(PAYLOAD, known)))

        assert checkout_client.calls == ["load_cart", "submit_order"]

    async def test_changed_cart_aborts_submission(self, checkout_client, cart):
        stale = copy.deepcopy(cart)
        stale["items"][0]["quantity"] = 2

        failure = unwrap_err(await F.collect(OrderActionCreator(checkout_client).submit_order(PAYLOAD, stale)))

        assert "submit_order" not in checkout_client.calls
        assert failure.action.type is O.SUBMIT_ORDER_FAILED
        assert isinstance(failure.action.error, CartChangedError)
        assert failure.action.error.kind is ErrorKind.CART_CHANGED
        assert types(failure.delivered) == [O.SUBMIT_ORDER_REQUESTED]

    async def test_cart_load_failure_counts_as_changed(self, cart):
        transport_error = TransportError(failure_response(500, "Server Error"))
        client = FakeCheckoutClient(cart=cart, fail={"load_cart": transport_error})

        failure = unwrap_err(await F.collect(OrderActionCreator(client).submit_order(PAYLOAD, cart)))

        error = failure.action.error
        assert isinstance(error, CartChangedError)
        assert isinstance(error.cause, RequestError)
        assert error.response is transport_error.response
        assert client.calls == ["load_cart"]

    async def test_server_cart_missing(self, cart):
        client = FakeCheckoutClient(cart=None)

        failure = unwrap_err(await F.collect(OrderActionCreator(client).submit_order(PAYLOAD, cart)))

        assert isinstance(failure.action.error, CartChangedError)

    async def test_malformed_cart_response_counts_as_changed(self, cart):
        client = FakeCheckoutClient(cart=cart, cart_body={"data": ["not", "a", "mapping"]})

        failure = unwrap_err(await F.collect(OrderActionCreator(client).submit_order(PAYLOAD, cart)))

        assert failure.action.type is O.SUBMIT_ORDER_FAILED
        assert isinstance(failure.action.error, CartChangedError)
        assert "submit_order" not in client.calls

    @pytest.mark.parametrize(
        "body",
        [
            {"data": {"order": {"order_id": 295}}, "meta": ["unexpected"]},
            "<html>ok</html>",
        ],
    )
    async def test_malformed_submit_response_keeps_token(self, cart, body):
        client = FakeCheckoutClient(cart=cart, submit_body=body)

        actions = unwrap(await F.collect(OrderActionCreator(client).submit_order(PAYLOAD)))

        assert actions[-1].type is O.SUBMIT_ORDER_SUCCEEDED
        assert actions[-1].meta == {"token": "order-token"}

    async def test_submit_failure(self, cart):
        response = failure_response(400, "Payment declined")
        client = FakeCheckoutClient(cart=cart, fail={"submit_order": TransportError(response)})

        failure = unwrap_err(await F.collect(OrderActionCreator(client).submit_order(PAYLOAD)))

        assert failure.action.type is O.SUBMIT_ORDER_FAILED
        assert failure.action.error.response is response
        assert str(failure.action.error) == "Payment declined"

    async def test_timeout(self, cart):
        client = FakeCheckoutClient(cart=cart, delay=0.5)
        options = RequestOptions(timeout=timedelta(milliseconds=10))

        failure = unwrap_err(await F.collect(OrderActionCreator(client).submit_order(PAYLOAD, None, options)))

        assert isinstance(failure.action.error, RequestError)
        assert str(failure.action.error) == "Request timed out"


class TestLoadOrder:
    async def test_success(self, checkout_client):
        actions = unwrap(await F.collect(OrderActionCreator(checkout_client).load_order(295)))

        assert types(actions) == [O.LOAD_ORDER_REQUESTED, O.LOAD_ORDER_SUCCEEDED]
        assert actions[1].payload == {"order": {"order_id": 295}}

    async def test_failure(self, cart):
        client = FakeCheckoutClient(cart=cart, fail={"load_order": TransportError(failure_response(404, "Not Found"))})

        failure = unwrap_err(await F.collect(OrderActionCreator(client).load_order(295)))

        assert types(failure.delivered) == [O.LOAD_ORDER_REQUESTED]
        assert failure.action.type is O.LOAD_ORDER_FAILED


class TestFinalizeOrder:
    async def test_success(self, checkout_client):
        actions = unwrap(await F.collect(OrderActionCreator(checkout_client).finalize_order(295)))

        assert types(actions) == [O.FINALIZE_ORDER_REQUESTED, O.FINALIZE_ORDER_SUCCEEDED]
        assert actions[1].payload["order"]["status"] == "COMPLETED"

    async def test_unexpected_exception_is_classified(self, cart):
        client = FakeCheckoutClient(cart=cart, fail={"finalize_order": ConnectionResetError("reset")})

        failure = unwrap_err(await F.collect(OrderActionCreator(client).finalize_order(295)))

        assert failure.action.type is O.FINALIZE_ORDER_FAILED
        assert isinstance(failure.action.error, RequestError)
        assert isinstance(failure.action.error.cause, ConnectionResetError)


@pytest.mark.parametrize("method", ["load_order", "finalize_order"])
async def test_requested_precedes_terminal(checkout_client, method):
    creator = OrderActionCreator(checkout_client)

    actions = unwrap(await F.collect(getattr(creator, method)(1)))

    assert len(actions) == 2
    assert actions[0].type.endswith("_REQUESTED")
    assert actions[1].type.endswith("_SUCCEEDED")
