"""High-level browser interactions built on the page and MCP client handles."""

import json
from typing import Any, Literal

from browser_bridge.browser.manager import BrowserManager
from browser_bridge.config import Settings
from browser_bridge.config import settings as default_settings
from browser_bridge.models import ToolResult, ViewportSize
from browser_bridge.utils.logging import get_logger

logger = get_logger(__name__)

ScrollDirection = Literal["up", "down", "left", "right"]

# In-page scripts take their data as a bound argument, never by interpolation.
OVERLAY_SCRIPT = """(msg) => {
  let overlay = document.getElementById('bridge-overlay');
  if (!overlay) {
    overlay = document.createElement('div');
    overlay.id = 'bridge-overlay';
    Object.assign(overlay.style, {
      position: 'fixed',
      bottom: '50px',
      left: '50%',
      transform: 'translateX(-50%)',
      background: 'rgba(32, 33, 36, 0.9)',
      color: 'white',
      padding: '12px 24px',
      zIndex: '2147483647',
      borderRadius: '24px',
      fontSize: '16px',
      fontFamily: 'Roboto, sans-serif',
      fontWeight: '500',
      pointerEvents: 'none',
      boxShadow: '0 4px 6px rgba(0,0,0,0.1)',
      transition: 'opacity 0.3s ease-in-out',
    });
    document.body.appendChild(overlay);
  }
  overlay.innerText = msg;
}"""

BORDER_OVERLAY_SCRIPT = """({ active, capturing }) => {
  if (!document.getElementById('bridge-border-style')) {
    const style = document.createElement('style');
    style.id = 'bridge-border-style';
    style.textContent = `
      #bridge-border {
        pointer-events: none;
        z-index: 2147483647;
        position: fixed;
        top: 0;
        left: 0;
        width: 100%;
        height: 100%;
        border: 2px solid rgb(0, 102, 255);
        box-shadow: inset 0 0 10px 0px rgba(0, 102, 255, 0.9);
        opacity: 1;
        transition: opacity 300ms ease-in-out;
        box-sizing: border-box;
      }
      #bridge-border.hidden { opacity: 0; }
      @keyframes bridge-breathe {
        0%, 100% { box-shadow: inset 0 0 20px 0px rgba(0, 102, 255, 0.9); }
        50% { box-shadow: inset 0 0 30px 10px rgba(0, 102, 255, 0.9); }
      }
      #bridge-border.breathing { animation: bridge-breathe 3s ease-in-out infinite; }
    `;
    document.head.appendChild(style);
  }

  let container = document.getElementById('bridge-border');
  if (!container) {
    container = document.createElement('div');
    container.id = 'bridge-border';
    document.body.appendChild(container);
  }

  container.classList.toggle('hidden', !active);
  container.classList.toggle('breathing', active && !capturing);
}"""

REMOVE_OVERLAY_SCRIPT = """() => {
  const overlay = document.getElementById('bridge-overlay');
  if (overlay) {
    overlay.remove();
  }
}"""

WINDOW_SIZE_SCRIPT = "() => ({ width: window.innerWidth, height: window.innerHeight })"

SCROLL_PAGE_SCRIPT = "(direction) => window.scrollBy(0, direction * window.innerHeight)"


class BrowserTools:
    """
    Coordinate and text based browser actions for an agent.

    Coordinates are given in model space, 0 to ``coordinate_scale`` on each
    axis, and scaled to the viewport before use. Failures of the action itself
    are reported through ``ToolResult.error``; failures to bring the browser
    session up propagate.
    """

    def __init__(self, browser_manager: BrowserManager, settings: Settings | None = None) -> None:
        self.browser_manager = browser_manager
        self.settings = settings or default_settings

    async def show_overlay(self, message: str) -> None:
        """Show a status message at the bottom of the page."""
        await self._decorate(OVERLAY_SCRIPT, message, "Failed to show overlay")

    async def update_border_overlay(self, active: bool, capturing: bool) -> None:
        """Show, animate or hide the border marking agent control."""
        await self._decorate(
            BORDER_OVERLAY_SCRIPT,
            {"active": active, "capturing": capturing},
            "Failed to update border overlay",
        )

    async def remove_overlay(self) -> None:
        """Remove the status message overlay."""
        await self._decorate(REMOVE_OVERLAY_SCRIPT, None, "Failed to remove overlay")

    async def _decorate(self, script: str, arg: Any, failure: str) -> None:
        if not self.settings.overlay_enabled:
            return
        page = await self.browser_manager.get_page()
        try:
            await page.evaluate(script, arg)
        except Exception as e:
            logger.warning(failure, error=str(e))

    async def get_viewport_size(self) -> ViewportSize | None:
        """Viewport size, falling back to the window's inner size."""
        page = await self.browser_manager.get_page()
        viewport = page.viewport_size
        if viewport:
            return ViewportSize(**viewport)

        size = await page.evaluate(WINDOW_SIZE_SCRIPT)
        if not size:
            return None
        return ViewportSize(**size)

    def _scale(self, x: float, y: float, viewport: ViewportSize) -> tuple[float, float]:
        scale = self.settings.coordinate_scale
        return x / scale * viewport.width, y / scale * viewport.height

    async def click_at(self, x: float, y: float) -> ToolResult:
        """Click at model-space coordinates."""
        await self.show_overlay(f"Clicking at {x}, {y}")
        page = await self.browser_manager.get_page()
        try:
            viewport = await self.get_viewport_size()
            if viewport is None:
                return ToolResult(error="Viewport not available")
            actual_x, actual_y = self._scale(x, y, viewport)
            await page.mouse.click(actual_x, actual_y)
            return ToolResult(
                output=f"Clicked at {x}, {y} (scaled to {actual_x:.0f}, {actual_y:.0f})"
            )
        except Exception as e:
            return ToolResult(error=f"Failed to click at {x}, {y}: {e}")

    async def type_text_at(
        self,
        x: float,
        y: float,
        text: str,
        press_enter: bool = False,
        clear_before_typing: bool = False,
    ) -> ToolResult:
        """Click to focus, then type text."""
        page = await self.browser_manager.get_page()
        clicked = await self.click_at(x, y)
        if clicked.error:
            return clicked

        try:
            if clear_before_typing:
                await page.keyboard.press("ControlOrMeta+A")
                await page.keyboard.press("Backspace")

            await page.keyboard.type(text)

            if press_enter:
                await page.keyboard.press("Enter")
            return ToolResult(output=f'Typed "{text}" at {x}, {y}')
        except Exception as e:
            return ToolResult(error=f"Failed to type at {x}, {y}: {e}")

    async def drag_and_drop(self, x: float, y: float, dest_x: float, dest_y: float) -> ToolResult:
        """Drag with the mouse between two model-space points."""
        page = await self.browser_manager.get_page()
        try:
            viewport = await self.get_viewport_size()
            if viewport is None:
                return ToolResult(error="Viewport not available")
            start_x, start_y = self._scale(x, y, viewport)
            end_x, end_y = self._scale(dest_x, dest_y, viewport)

            await page.mouse.move(start_x, start_y)
            await page.mouse.down()
            await page.mouse.move(end_x, end_y, steps=self.settings.drag_steps)
            await page.mouse.up()
            return ToolResult(output=f"Dragged from {x},{y} to {dest_x},{dest_y}")
        except Exception as e:
            return ToolResult(error=f"Failed to drag: {e}")

    async def open_web_browser(self) -> ToolResult:
        """Make sure the browser and MCP client are up."""
        await self.browser_manager.get_client()
        return ToolResult(output="Browser opened")

    async def navigate(self, url: str) -> ToolResult:
        """Load a URL in the controlled page."""
        client = await self.browser_manager.get_client()
        result = await client.call_tool("navigate_page", {"url": url})
        if result.is_error:
            return ToolResult(error=result.text or f"Failed to navigate to {url}", url=url)
        return ToolResult(output=result.text or f"Navigated to {url}", url=url)

    async def scroll_document(self, direction: ScrollDirection, amount: int) -> ToolResult:
        """Scroll with the mouse wheel from the middle of the viewport."""
        deltas = {
            "up": (0, -amount),
            "down": (0, amount),
            "left": (-amount, 0),
            "right": (amount, 0),
        }
        if direction not in deltas:
            return ToolResult(error=f"Unknown scroll direction: {direction}")
        delta_x, delta_y = deltas[direction]

        page = await self.browser_manager.get_page()

        # Wheel events also reach scrollable containers, not just the document
        viewport = await self.get_viewport_size()
        if viewport is not None:
            await page.mouse.move(viewport.width / 2, viewport.height / 2)
        await page.mouse.wheel(delta_x, delta_y)

        return ToolResult(output=f"Scrolled {direction} by {amount}")

    async def page_down(self) -> ToolResult:
        page = await self.browser_manager.get_page()
        await page.evaluate(SCROLL_PAGE_SCRIPT, 1)
        return ToolResult(output="Paged down")

    async def page_up(self) -> ToolResult:
        page = await self.browser_manager.get_page()
        await page.evaluate(SCROLL_PAGE_SCRIPT, -1)
        return ToolResult(output="Paged up")

    async def take_snapshot(self, verbose: bool = False) -> ToolResult:
        """Text snapshot of the page's accessibility tree."""
        client = await self.browser_manager.get_client()
        result = await client.call_tool("take_snapshot", {"verbose": verbose})
        return ToolResult(output=result.text)

    async def wait_for(self, text: str) -> ToolResult:
        client = await self.browser_manager.get_client()
        await client.call_tool("wait_for", {"text": text})
        return ToolResult(output=f'Waited for text "{text}"')

    async def handle_dialog(
        self, action: Literal["accept", "dismiss"], prompt_text: str | None = None
    ) -> ToolResult:
        """Accept or dismiss the open dialog."""
        client = await self.browser_manager.get_client()
        arguments: dict[str, Any] = {"action": action}
        if prompt_text is not None:
            arguments["promptText"] = prompt_text
        await client.call_tool("handle_dialog", arguments)
        return ToolResult(output=f"Dialog {action}ed")

    async def evaluate_script(self, script: str) -> ToolResult:
        """
        Evaluate a JavaScript expression in the page.

        Args:
            script: Expression or function source

        Returns:
            Result rendered as text; objects, booleans and null as JSON
        """
        page = await self.browser_manager.get_page()
        try:
            result = await page.evaluate(script)
        except Exception as e:
            return ToolResult(error=f"Script execution failed: {e}")

        # Playwright returns None for both null and undefined
        if isinstance(result, (dict, list, bool)) or result is None:
            return ToolResult(output=json.dumps(result))
        return ToolResult(output=str(result))

    async def press_key(self, key: str) -> ToolResult:
        client = await self.browser_manager.get_client()
        await client.call_tool("press_key", {"key": key})
        return ToolResult(output=f'Pressed key "{key}"')

    async def drag(self, from_uid: str, to_uid: str) -> ToolResult:
        """Drag one snapshot element onto another."""
        client = await self.browser_manager.get_client()
        await client.call_tool("drag", {"from_uid": from_uid, "to_uid": to_uid})
        return ToolResult(output="Dragged element")

    async def key_combination(self, keys: str) -> ToolResult:
        """Press a key combination such as ``Control+S``."""
        return await self.press_key(keys)
