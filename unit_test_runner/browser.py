import contextlib

from playwright.async_api import Error, async_playwright

from .harness import COMPLETION_PREDICATE


class PageSession:
    """A single Chromium page, kept for the whole run."""

    def __init__(self, page):
        self.page = page

    async def open(self, url, on_console):
        # Capture console logs before the page starts running scripts
        self.page.on("console", lambda msg: on_console(msg.text))

        try:
            # timeout=0 waits for the load indefinitely
            await self.page.goto(url, timeout=0)
        except Error:
            return "fail"
        return "success"

    async def evaluate(self):
        try:
            return await self.page.evaluate(COMPLETION_PREDICATE)
        except Error:
            # A throwing predicate (no G_testRunner on the page) reads as a failed run
            return None


@contextlib.asynccontextmanager
async def open_session(headless=True):
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=headless)
        try:
            page = await browser.new_page()
            yield PageSession(page)
        finally:
            await browser.close()
