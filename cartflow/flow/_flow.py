"""
Flow — lazy, cancellable stream of lifecycle actions.

A flow is a tuple of producers. Iterating it starts one task per producer;
all of them emit into a single queue (fan-in). Order is preserved within a
producer, never across producers.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass

import structlog
from kungfu import Result, Ok, Error

from cartflow.flow._cancel import CancellationToken
from cartflow.flow._types import ActionError, FlowFailure

logger = structlog.get_logger(__name__)

type Emit[A] = Callable[[A], None]
type Producer[A] = Callable[[Emit[A]], Awaitable[None]]

# Detached producers keep running after a sibling failed.
_detached: set[asyncio.Task[None]] = set()

# ═══════════════════════════════════════════════════════════════════════════════
# Queue Items
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class _Event[A]:
    value: A


@dataclass(frozen=True, slots=True)
class _Failed:
    exc: Exception


@dataclass(frozen=True, slots=True)
class _Done:
    pass


@dataclass(frozen=True, slots=True)
class _Cancelled:
    pass


type _Item[A] = _Event[A] | _Failed | _Done | _Cancelled


@dataclass(slots=True)
class _Inbox[A]:
    queue: asyncio.Queue[_Item[A]]
    closed: bool = False


# ═══════════════════════════════════════════════════════════════════════════════
# Flow
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Flow[A]:
    """
    Lazy action stream. Nothing runs until it is iterated.

    Example:
        async for action in creator.update_address(state, {"first_name": "A"}):
            store.dispatch(action)

    Terminal failures raise ActionError; its .action is the *Failed action.
    """

    producers: tuple[Producer[A], ...]
    cancellation: CancellationToken | None = None

    def merge(self, *others: Flow[A]) -> Flow[A]:
        """Fan-in with other flows. Keeps this flow's cancellation token."""
        producers = self.producers
        for other in others:
            producers = (*producers, *other.producers)
        return Flow(producers=producers, cancellation=self.cancellation)

    def __aiter__(self) -> AsyncIterator[A]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[A]:
        token = self.cancellation
        if token is not None and token.cancelled:
            return
        if not self.producers:
            return

        inbox: _Inbox[A] = _Inbox(queue=asyncio.Queue())
        tasks = [asyncio.create_task(_drive(p, inbox)) for p in self.producers]
        unregister = (
            token.on_cancel(lambda: inbox.queue.put_nowait(_Cancelled()))
            if token is not None
            else None
        )

        remaining = len(tasks)
        failed = False
        try:
            while remaining:
                item = await inbox.queue.get()
                # _Cancelled only wakes the loop; events queued ahead of it are dropped too
                if token is not None and token.cancelled:
                    logger.debug("Flow cancelled", pending=remaining)
                    return
                match item:
                    case _Event(value=value):
                        yield value
                    case _Done():
                        remaining -= 1
                    case _Failed(exc=exc):
                        failed = True
                        raise exc
        finally:
            inbox.closed = True
            if unregister is not None:
                unregister()
            for task in tasks:
                if task.done():
                    continue
                if failed:
                    _detached.add(task)
                    task.add_done_callback(_detached.discard)
                else:
                    task.cancel()


async def _drive[A](producer: Producer[A], inbox: _Inbox[A]) -> None:
    def emit(value: A) -> None:
        if not inbox.closed:
            inbox.queue.put_nowait(_Event(value))

    try:
        await producer(emit)
    except Exception as exc:
        if inbox.closed:
            logger.warning(
                "Discarding failure from detached producer",
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return
        inbox.queue.put_nowait(_Failed(exc))
    else:
        inbox.queue.put_nowait(_Done())


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def flow[A](producer: Producer[A], cancellation: CancellationToken | None = None) -> Flow[A]:
    """
    Create a flow from a single producer.

    Example:
        async def produce(emit):
            emit(Action(OrderActionType.LOAD_ORDER_REQUESTED))
            ...

        actions = F.flow(produce)
    """
    return Flow(producers=(producer,), cancellation=cancellation)


def empty[A]() -> Flow[A]:
    """Flow that completes immediately without events."""
    return Flow(producers=())


def merge[A](*flows: Flow[A], cancellation: CancellationToken | None = None) -> Flow[A]:
    """
    Fan-in several flows into one.

    Fails on the first failing sub-flow; the others keep running detached
    and their later events are dropped.
    """
    producers: tuple[Producer[A], ...] = ()
    for f in flows:
        producers = (*producers, *f.producers)
    return Flow(producers=producers, cancellation=cancellation)


# ═══════════════════════════════════════════════════════════════════════════════
# collect() — Drain Into Result
# ═══════════════════════════════════════════════════════════════════════════════


async def collect[A](f: Flow[A]) -> Result[tuple[A, ...], FlowFailure[A]]:
    """
    Drain a flow.

    Example:
        match await F.collect(creator.load_order(42)):
            case Ok(actions):
                ...
            case Error(failure):
                print(failure.action.type)
    """
    delivered: list[A] = []
    try:
        async for action in f:
            delivered.append(action)
    except ActionError as exc:
        return Error(FlowFailure(error=exc, delivered=tuple(delivered)))
    return Ok(tuple(delivered))


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Emit", "Producer", "Flow", "flow", "empty", "merge", "collect")
