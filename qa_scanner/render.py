from __future__ import annotations

from typing import Optional

from .config import DEFAULT_CONFIG
from .document import TEXT_STYLE_SELECTOR, TOUCH_TARGET_SELECTOR, PageDocument, RenderMetrics
from .errors import DocumentUnavailableError

# Runs inside the page. Element lists are collected in document order so they
# line up with the re-parsed serialized DOM.
COLLECT_SCRIPT = """
({touchSelector, textSelector}) => {
  const doctype = document.doctype ? new XMLSerializer().serializeToString(document.doctype) : "";
  const box = (el) => { const r = el.getBoundingClientRect(); return {width: r.width, height: r.height}; };
  return {
    html: doctype + document.documentElement.outerHTML,
    metrics: {
      viewportWidth: window.innerWidth,
      bodyScrollWidth: document.body ? document.body.scrollWidth : null,
      bodyText: document.body ? document.body.innerText : null,
      images: Array.from(document.querySelectorAll("img")).map((img) => ({
        naturalWidth: img.naturalWidth, complete: img.complete,
      })),
      touchTargets: Array.from(document.querySelectorAll(touchSelector)).map(box),
      textStyles: Array.from(document.querySelectorAll(textSelector)).map((el) => ({
        fontSize: parseFloat(window.getComputedStyle(el).fontSize),
        hasText: el.textContent.trim().length > 0,
      })),
    },
  };
}
"""


def render_document(url: str, config: Optional[dict] = None) -> PageDocument:
    """
    Loads the page in headless Chromium and snapshots its DOM together with render metrics.
    Requires the optional Playwright dependency.
    """
    config = config if config else DEFAULT_CONFIG
    render_cfg = config.get("Render", DEFAULT_CONFIG["Render"])
    global_cfg = config.get("Global", {})
    try:
        from playwright.sync_api import Error as PlaywrightError, sync_playwright
    except ImportError as e:
        raise DocumentUnavailableError("Rendering requires Playwright (pip install 'qa-scanner[render]')") from e

    timeout = render_cfg.get("timeout", 20)
    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True)
            try:
                context = browser.new_context(
                    user_agent=global_cfg.get("user_agent") or None,
                    viewport={
                        "width": render_cfg.get("viewport_width", 390),
                        "height": render_cfg.get("viewport_height", 844),
                    },
                )
                page = context.new_page()
                page.set_default_timeout(timeout * 1000)
                page.goto(url, wait_until=render_cfg.get("wait_until", "networkidle"))
                snapshot = page.evaluate(
                    COLLECT_SCRIPT,
                    {"touchSelector": TOUCH_TARGET_SELECTOR, "textSelector": TEXT_STYLE_SELECTOR},
                )
                final_url = page.url
            finally:
                browser.close()
    except PlaywrightError as e:
        if global_cfg.get("debug"):
            print(f"Rendering failed for {url}: {e}")
        raise DocumentUnavailableError(f"Could not render {url}: {e}") from e

    return PageDocument.from_html(final_url or url, snapshot.get("html"), RenderMetrics.from_dict(snapshot.get("metrics")))
