"""
Headless browser rendering for client-side rendered pages.

Crawlers depend on the PageRenderer protocol only, so tests can hand them
canned HTML without launching a browser.
"""
from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Optional, Protocol

from playwright.async_api import Browser, BrowserContext, Error as PlaywrightError, async_playwright

from hltb.config import DEFAULT_BLOCKED_TYPES, Settings
from hltb.errors import RenderingError

logger = logging.getLogger(__name__)


class PageRenderer(Protocol):
    async def render(self, url: str, wait_for: str) -> str:
        """Return the page's HTML once an element matching ``wait_for`` exists."""
        ...


async def _close_quietly(resource, label: str) -> None:
    # Teardown must not replace the error that triggered it.
    try:
        await resource.close()
    except Exception as exc:
        logger.debug("Ignoring error while closing %s: %s", label, exc)


class PlaywrightRenderer:
    """
    Chromium-backed PageRenderer.

    One browser and context per renderer; every render() call gets its own tab,
    closed afterwards. Failures from Playwright (including wait timeouts) are
    re-raised as RenderingError.
    """

    def __init__(
        self,
        *,
        user_agent: str,
        sandboxed: bool = True,
        timeout_ms: Optional[int] = None,
        block_resources: bool = True,
        blocked_types: Iterable[str] = DEFAULT_BLOCKED_TYPES,
    ) -> None:
        self.user_agent = user_agent
        self.sandboxed = sandboxed
        self.timeout_ms = timeout_ms
        self.blocked_types: FrozenSet[str] = frozenset(blocked_types) if block_resources else frozenset()

        self._playwright = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._started = False

    @classmethod
    def from_settings(cls, settings: Settings, *, sandboxed: Optional[bool] = None) -> "PlaywrightRenderer":
        return cls(
            user_agent=settings.user_agent,
            sandboxed=settings.sandboxed if sandboxed is None else sandboxed,
            timeout_ms=settings.timeout_ms,
            block_resources=settings.block_resources,
            blocked_types=settings.blocked_types,
        )

    async def __aenter__(self) -> "PlaywrightRenderer":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def _launch_args(self) -> List[str]:
        return [] if self.sandboxed else ["--no-sandbox"]

    async def _route_request(self, route) -> None:
        if route.request.resource_type in self.blocked_types:
            await route.abort()
        else:
            await route.continue_()

    async def start(self) -> None:
        if self._started:
            return
        logger.info("Launching headless Chromium (sandboxed=%s)", self.sandboxed)
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=True,
                chromium_sandbox=self.sandboxed,
                args=self._launch_args(),
            )
            self._context = await self._browser.new_context(user_agent=self.user_agent)
            if self.blocked_types:
                await self._context.route("**/*", self._route_request)
                logger.debug("Blocking resource types: %s", ", ".join(sorted(self.blocked_types)))
        except PlaywrightError as exc:
            await self.close()
            raise RenderingError(f"Failed to launch browser: {exc}") from exc
        self._started = True

    async def render(self, url: str, wait_for: str) -> str:
        if not self._started:
            await self.start()
        if not self._context:
            raise RenderingError("Browser context not initialized")

        page = None
        try:
            page = await self._context.new_page()
            if self.timeout_ms:
                page.set_default_timeout(self.timeout_ms)
            logger.debug("Navigating to %s", url)
            await page.goto(url, wait_until="domcontentloaded")
            await page.wait_for_selector(wait_for)
            return await page.content()
        except PlaywrightError as exc:
            raise RenderingError(f"Failed to render {url}: {exc}") from exc
        finally:
            if page is not None:
                await _close_quietly(page, f"tab for {url}")

    async def close(self) -> None:
        if self._context:
            await _close_quietly(self._context, "browser context")
        if self._browser:
            await _close_quietly(self._browser, "browser")
        if self._playwright:
            try:
                await self._playwright.stop()
            except Exception as exc:
                logger.debug("Ignoring error while stopping Playwright: %s", exc)
        self._started = False
        self._context = None
        self._browser = None
        self._playwright = None


__all__ = ["PageRenderer", "PlaywrightRenderer"]
