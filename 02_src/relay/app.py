"""Application bootstrap and lifecycle management."""

import asyncio
from typing import Iterable, Protocol

import httpx

from .config import Settings, load_settings
from .context_store import IContextStore, InMemoryContextStore
from .dispatch import ConversationDispatcher
from .logging_config import get_logger
from .lookup import ProductLookup
from .models import InboundEvent
from .oracle import WatsonConversationOracle
from .output_router import MessengerClient, OutputRouter
from .rendering import ResponseRenderer

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    @property
    def settings(self) -> Settings:
        ...

    @property
    def context_store(self) -> IContextStore:
        ...

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Forget all conversation contexts."""
        ...

    def submit(self, events: Iterable[InboundEvent]) -> asyncio.Task:
        """Schedule a webhook batch for background dispatch."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

        # Components (will be initialized in start())
        self._http: httpx.AsyncClient | None = None
        self._context_store: IContextStore | None = None
        self._dispatcher: ConversationDispatcher | None = None
        self._output_router: OutputRouter | None = None
        self._tasks: set[asyncio.Task] = set()

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # Fatal when required config is missing
        if self._settings is None:
            self._settings = load_settings()
        settings = self._settings

        # 1. Shared HTTP client; its timeout is the only turn timeout
        self._http = httpx.AsyncClient(
            timeout=settings.http_timeout, transport=self._transport
        )

        # 2. Context store (no dependencies)
        self._context_store = InMemoryContextStore()

        # 3. Dialog service and product lookup (depend on HTTP client)
        oracle = WatsonConversationOracle(
            client=self._http,
            url=settings.conversation_url,
            username=settings.conversation_username,
            password=settings.conversation_password,
            workspace_id=settings.conversation_workspace,
        )
        lookup = ProductLookup(
            client=self._http,
            url=settings.products_api_url,
            client_id=settings.products_api_key,
            client_secret=settings.products_api_secret,
        )
        logger.info("Dialog service and product lookup initialized")

        # 4. Outbound delivery
        self._output_router = OutputRouter(
            MessengerClient(self._http, settings.page_access_token)
        )

        # 5. Dispatcher (depends on everything above)
        self._dispatcher = ConversationDispatcher(
            context_store=self._context_store,
            oracle=oracle,
            lookup=lookup,
            renderer=ResponseRenderer(settings.server_url),
            output_router=self._output_router,
        )
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks.clear()

        if self._http:
            await self._http.aclose()
            self._http = None
            logger.info("HTTP client closed")

    async def reset(self) -> None:
        """Forget all conversation contexts."""
        if self._context_store is not None:
            self._context_store.reset()
            logger.info("Context store cleared")

    def submit(self, events: Iterable[InboundEvent]) -> asyncio.Task:
        """Dispatch a batch in the background; the caller does not wait."""
        task = asyncio.create_task(self.dispatcher.dispatch_batch(events))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait for all scheduled batches to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    @property
    def settings(self) -> Settings:
        """Get settings."""
        if not self._settings:
            raise RuntimeError("Application not started")
        return self._settings

    @property
    def context_store(self) -> IContextStore:
        """Get context store instance."""
        if self._context_store is None:
            raise RuntimeError("Application not started")
        return self._context_store

    @property
    def dispatcher(self) -> ConversationDispatcher:
        """Get dispatcher instance."""
        if not self._dispatcher:
            raise RuntimeError("Application not started")
        return self._dispatcher
