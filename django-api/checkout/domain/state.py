"""Lifecycle of a single checkout attempt.

    Created --capture--> GatewayPaid --settle--> Persisted | Rejected | Orphaned

Each state is a frozen dataclass; transitions are pure functions that return
the next state and refuse to leave a terminal one.
"""

from dataclasses import dataclass


class InvalidTransition(Exception):
    """Raised when a transition is applied to a state that does not allow it."""


@dataclass(frozen=True)
class Created:
    order_id: str
    terminal = False


@dataclass(frozen=True)
class GatewayPaid:
    order_id: str
    payment_id: str
    terminal = False


@dataclass(frozen=True)
class Persisted:
    order_id: str
    payment_id: str
    terminal = True


@dataclass(frozen=True)
class Rejected:
    order_id: str
    payment_id: str
    terminal = True


@dataclass(frozen=True)
class Orphaned:
    """Money captured by the gateway with no booking to show for it."""

    order_id: str
    payment_id: str
    reason: str
    terminal = True


CheckoutState = Created | GatewayPaid | Persisted | Rejected | Orphaned


def capture(state: CheckoutState, payment_id: str) -> GatewayPaid:
    if not isinstance(state, Created):
        raise InvalidTransition(f"cannot capture payment from {type(state).__name__}")
    return GatewayPaid(order_id=state.order_id, payment_id=payment_id)


def reject(state: CheckoutState) -> Rejected:
    if not isinstance(state, GatewayPaid):
        raise InvalidTransition(f"cannot reject from {type(state).__name__}")
    return Rejected(order_id=state.order_id, payment_id=state.payment_id)


def persist(state: CheckoutState) -> Persisted:
    if not isinstance(state, GatewayPaid):
        raise InvalidTransition(f"cannot persist from {type(state).__name__}")
    return Persisted(order_id=state.order_id, payment_id=state.payment_id)


def orphan(state: CheckoutState, reason: str) -> Orphaned:
    if not isinstance(state, GatewayPaid):
        raise InvalidTransition(f"cannot orphan from {type(state).__name__}")
    return Orphaned(order_id=state.order_id, payment_id=state.payment_id, reason=reason)


def settle(state: CheckoutState, signature_valid: bool, persisted: bool, reason: str = "") -> CheckoutState:
    """Resolve a paid attempt into its terminal state."""
    if not signature_valid:
        return reject(state)
    if not persisted:
        return orphan(state, reason)
    return persist(state)
