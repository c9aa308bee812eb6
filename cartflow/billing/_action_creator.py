"""
Billing address orchestration.

continue_as_guest: address flow and consent flow merged into one stream.
update_address: single create-or-update flow with email fallback.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from kungfu import Ok, Error, Some

from cartflow import flow as F
from cartflow import lift
from cartflow._types import Body, Lazy
from cartflow.billing._actions import BillingAddressActionType as B, CustomerActionType as C
from cartflow.billing._types import GuestCredentials
from cartflow.errors import (
    CheckoutError,
    MissingDataError,
    MissingDataType,
    UnableToContinueAsGuestError,
    UpdateCustomerError,
)
from cartflow.flow import Action, ActionError
from cartflow.state import Checkout, StateAccessor
from cartflow.transport import (
    BillingAddressRequestSender,
    CustomerRequestSender,
    RequestOptions,
    Response,
    cancellation_of,
)

logger = structlog.get_logger(__name__)


class BillingAddressActionCreator:
    def __init__(
        self,
        request_sender: BillingAddressRequestSender,
        customer_request_sender: CustomerRequestSender,
    ) -> None:
        self._request_sender = request_sender
        self._customer_request_sender = customer_request_sender

    # ═══════════════════════════════════════════════════════════════════════════
    # continue_as_guest()
    # ═══════════════════════════════════════════════════════════════════════════

    def continue_as_guest(
        self,
        state: StateAccessor,
        credentials: GuestCredentials,
        options: RequestOptions | None = None,
    ) -> F.Flow[Action]:
        """
        Attach guest email to the billing address and update marketing consent.

        Raises:
            MissingDataError: no checkout loaded
            UnableToContinueAsGuestError: a signed-in customer is present

        Both checks happen before any event or request. The consent flow is
        empty when consent is Nothing().
        """
        checkout = _require_checkout(state)

        customer = state.get_customer()
        if customer is not None and not customer.is_guest:
            raise UnableToContinueAsGuestError()

        stored = state.get_billing_address()
        body: dict[str, Any] = {"email": credentials.email}
        match credentials.marketing_email_consent:
            case Some(consent):
                body["marketing_email_consent"] = consent
            case _:
                pass
        if stored is not None:
            existing = {k: v for k, v in stored.items() if k != "country"}
            body = {**existing, **body}

        async def produce(emit: F.Emit[Action]) -> None:
            emit(Action(B.CONTINUE_AS_GUEST_REQUESTED))

            match await self._create_or_update(checkout, body, options):
                case Ok(response):
                    logger.info("Continued as guest", checkout_id=checkout.id)
                    emit(Action(B.CONTINUE_AS_GUEST_SUCCEEDED, payload=response.body))
                case Error(e):
                    raise ActionError(Action.failure(B.CONTINUE_AS_GUEST_FAILED, e)) from e

        return F.merge(
            F.flow(produce),
            self._update_customer_consent(credentials, options),
            cancellation=cancellation_of(options),
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # update_address()
    # ═══════════════════════════════════════════════════════════════════════════

    def update_address(
        self,
        state: StateAccessor,
        address: Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> F.Flow[Action]:
        """
        Create or update the billing address.

        An email missing from ``address`` falls back to the stored one, since
        it may have been set separately through continue_as_guest. A stored
        address id always turns the call into an update.
        """
        checkout = _require_checkout(state)
        stored = state.get_billing_address()

        body = dict(address)
        if "email" not in body and stored is not None and "email" in stored:
            body["email"] = stored["email"]
        if stored is not None and stored.get("id"):
            body["id"] = stored["id"]

        async def produce(emit: F.Emit[Action]) -> None:
            emit(Action(B.UPDATE_BILLING_ADDRESS_REQUESTED))

            match await self._create_or_update(checkout, body, options):
                case Ok(response):
                    emit(Action(B.UPDATE_BILLING_ADDRESS_SUCCEEDED, payload=response.body))
                case Error(e):
                    raise ActionError(Action.failure(B.UPDATE_BILLING_ADDRESS_FAILED, e)) from e

        return F.flow(produce, cancellation=cancellation_of(options))

    # ═══════════════════════════════════════════════════════════════════════════
    # Helpers
    # ═══════════════════════════════════════════════════════════════════════════

    def _update_customer_consent(
        self,
        credentials: GuestCredentials,
        options: RequestOptions | None,
    ) -> F.Flow[Action]:
        match credentials.marketing_email_consent:
            case Some(consent):
                pass
            case _:
                return F.empty()

        sender = self._customer_request_sender
        customer = {"email": credentials.email, "accepts_marketing": consent}

        async def produce(emit: F.Emit[Action]) -> None:
            emit(Action(C.UPDATE_CUSTOMER_REQUESTED))

            match await lift.request(lambda: sender.update_customer(customer, options), options):
                case Ok(response):
                    emit(Action(C.UPDATE_CUSTOMER_SUCCEEDED, payload=response.body))
                case Error(e):
                    error = UpdateCustomerError.wrap(e)
                    logger.warning("Marketing consent update failed", error=str(e))
                    raise ActionError(Action.failure(C.UPDATE_CUSTOMER_FAILED, error)) from e

        return F.flow(produce)

    def _create_or_update(
        self,
        checkout: Checkout,
        body: Body,
        options: RequestOptions | None,
    ) -> Lazy[Response[Body], CheckoutError]:
        sender = self._request_sender
        if not body.get("id"):
            return lift.request(lambda: sender.create_address(checkout.id, body, options), options)
        return lift.request(lambda: sender.update_address(checkout.id, body, options), options)


def _require_checkout(state: StateAccessor) -> Checkout:
    checkout = state.get_checkout()
    if checkout is None:
        raise MissingDataError.of(MissingDataType.CHECKOUT)
    return checkout


__all__ = ("BillingAddressActionCreator",)
