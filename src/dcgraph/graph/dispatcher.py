"""Dispatcher: routes an incoming message to a node and sends its actions."""

import asyncio
import copy
import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from dcgraph.config.settings import DispatchSettings
from dcgraph.core.errors import AsyncContextError
from dcgraph.core.interfaces import Handler, SendContext
from dcgraph.core.types import IncomingMessage
from dcgraph.graph.resolution import CompiledAction, CompiledNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    """Outcome of payload extraction for one message."""

    get_started: bool = False
    payload: str | None = None
    node: CompiledNode | None = None


class Dispatcher:
    """
    Message handler produced by ``GraphHandlerBuilder.build``.

    Holds a read-only snapshot of the compiled graph and the lifecycle
    handlers. Calling it processes one message:

    1. A get-started postback with a registered get-started handler calls
       that handler and stops.
    2. Otherwise the postback payload is taken, and a quick-reply payload
       overrides it.
    3. If the payload is the key of a node, the node's actions are sent in
       order.
    4. The unhandled handler, if any, is called. With the default settings
       this also happens after a matched node's actions were sent.

    Routing keeps no per-message state, so the dispatcher is safe to call
    concurrently.
    """

    def __init__(
        self,
        nodes: Mapping[str, CompiledNode],
        *,
        get_started_handler: Handler | None = None,
        unhandled_handler: Handler | None = None,
        settings: DispatchSettings | None = None,
    ):
        self._nodes = nodes
        self._get_started_handler = get_started_handler
        self._unhandled_handler = unhandled_handler
        self._settings = settings or DispatchSettings()
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def nodes(self) -> Mapping[str, CompiledNode]:
        return self._nodes

    @property
    def settings(self) -> DispatchSettings:
        return self._settings

    def route(self, message: Any) -> Route:
        """
        Extract the payload of ``message`` and find its node.

        Args:
            message: IncomingMessage, mapping or attribute object

        Returns:
            Route describing what dispatch will do
        """
        msg = IncomingMessage.coerce(message)
        payload: str | None = None

        if msg.postback is not None:
            if (
                self._get_started_handler is not None
                and msg.postback.payload == self._settings.get_started_payload
            ):
                return Route(get_started=True, payload=msg.postback.payload)
            payload = msg.postback.payload

        if msg.message is not None and msg.message.quick_reply is not None:
            payload = msg.message.quick_reply.payload

        node = self._nodes.get(payload) if payload else None
        return Route(payload=payload, node=node)

    def __call__(self, context: SendContext, message: Any) -> None:
        """Dispatch one message synchronously.

        Awaitable results of send operations and handlers are scheduled as
        tasks on the running event loop, in declared order, without waiting
        for them. Without a running loop they raise AsyncContextError; use
        ``adispatch`` there.
        """
        route = self.route(message)

        if route.get_started:
            logger.debug("Dispatching to get-started handler")
            self._initiate(self._get_started_handler(context, message))  # type: ignore[misc]
            return

        if route.node is not None:
            self._log_match(route)
            for action in route.node.actions:
                self._initiate(self._operation(context, action)(*copy.deepcopy(action.args)))
        else:
            self._log_miss(route)

        if self._should_call_unhandled(route):
            self._initiate(self._unhandled_handler(context, message))  # type: ignore[misc]

    async def adispatch(self, context: SendContext, message: Any) -> None:
        """Dispatch one message, awaiting each send operation and handler in order."""
        route = self.route(message)

        if route.get_started:
            logger.debug("Dispatching to get-started handler")
            await _maybe_await(self._get_started_handler(context, message))  # type: ignore[misc]
            return

        if route.node is not None:
            self._log_match(route)
            for action in route.node.actions:
                await _maybe_await(
                    self._operation(context, action)(*copy.deepcopy(action.args))
                )
        else:
            self._log_miss(route)

        if self._should_call_unhandled(route):
            await _maybe_await(self._unhandled_handler(context, message))  # type: ignore[misc]

    def _initiate(self, result: Any) -> None:
        if not inspect.isawaitable(result):
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            if inspect.iscoroutine(result):
                result.close()
            raise AsyncContextError(
                "Send operation or handler returned an awaitable outside an event loop; "
                "use Dispatcher.adispatch"
            ) from None
        # Tasks start in creation order; hold a reference until each finishes
        task = loop.create_task(_maybe_await(result))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _should_call_unhandled(self, route: Route) -> bool:
        if self._unhandled_handler is None:
            return False
        return route.node is None or self._settings.unhandled_after_match

    @staticmethod
    def _operation(context: SendContext, action: CompiledAction) -> Any:
        # AttributeError here means the context lacks the operation
        return getattr(context, action.operation)

    @staticmethod
    def _log_match(route: Route) -> None:
        node = route.node
        assert node is not None
        logger.debug(
            f"Routing payload to node '{node.name}' ({len(node.actions)} action(s))",
            extra={"node_name": node.name, "node_key": node.key},
        )

    @staticmethod
    def _log_miss(route: Route) -> None:
        if route.payload:
            logger.debug(
                "No node registered for payload",
                extra={"payload": route.payload},
            )
        else:
            logger.debug("Message carries no payload")


async def _maybe_await(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result
