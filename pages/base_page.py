import logging
import re

from playwright.sync_api import Page, TimeoutError as PlaywrightTimeoutError

from config.pages import ACTION_TIMEOUT_MS, NAVIGATION_TIMEOUT_MS
from utils.exceptions import ElementUnavailable, NavigationTimeout

logger = logging.getLogger(__name__)


class BasePage:
    """
    Page对象基类，每个Page只绑定一个page句柄
    Playwright 的 TimeoutError 在这里统一转换为 ElementUnavailable / NavigationTimeout，不重试、不吞掉
    """

    def __init__(self, page: Page, timeout: int = ACTION_TIMEOUT_MS,
                 navigation_timeout: int = NAVIGATION_TIMEOUT_MS):
        self.page = page
        self.timeout = timeout
        self.navigation_timeout = navigation_timeout

    # ========= 基础动作 =========
    def open(self, url: str):
        logger.debug("open %s", url)
        self.page.goto(url)

    def click(self, locator, name: str = ""):
        try:
            locator.scroll_into_view_if_needed(timeout=self.timeout)
            locator.click(timeout=self.timeout)
        except PlaywrightTimeoutError as exc:
            raise ElementUnavailable(name or str(locator), "click", exc.message) from exc

    def fill(self, locator, value: str, name: str = ""):
        try:
            locator.fill(value, timeout=self.timeout)
        except PlaywrightTimeoutError as exc:
            raise ElementUnavailable(name or str(locator), "fill", exc.message) from exc

    def text(self, locator, name: str = "") -> str:
        try:
            return locator.inner_text(timeout=self.timeout)
        except PlaywrightTimeoutError as exc:
            raise ElementUnavailable(name or str(locator), "read text", exc.message) from exc

    def text_or_default(self, locator, default: str = "", name: str = "") -> str:
        """元素不存在时返回默认值，如购物车角标"""
        if locator.count() == 0:
            return default
        try:
            return locator.first.text_content(timeout=self.timeout) or default
        except PlaywrightTimeoutError as exc:
            # count()之后元素消失
            raise ElementUnavailable(name or str(locator), "read text", exc.message) from exc

    def get_texts(self, locator) -> list[str]:
        return [text.strip() for text in locator.all_text_contents()]

    def get_count(self, locator) -> int:
        return locator.count()

    # ========= 等待 =========
    def wait_visible(self, locator, name: str = ""):
        try:
            locator.wait_for(state="visible", timeout=self.timeout)
        except PlaywrightTimeoutError as exc:
            raise ElementUnavailable(name or str(locator), "wait visible", exc.message) from exc

    def wait_url(self, pattern: str):
        try:
            self.page.wait_for_url(re.compile(pattern), timeout=self.navigation_timeout)
        except PlaywrightTimeoutError as exc:
            raise NavigationTimeout(pattern, self.current_url) from exc

    # ========= 辅助 =========
    @property
    def current_url(self) -> str:
        return self.page.url
