import logging

import allure
from playwright.sync_api import Page

from config.locators import INVENTORY_LOCATORS
from config.pages import URLS, ENV, URL_PATTERNS
from data.login_data import Credentials
from pages.inventory_page import InventoryPage
from pages.login_page import LoginPage

logger = logging.getLogger(__name__)


def authenticate(page: Page, credentials: Credentials, urls: dict = None, **page_options) -> Page:
    """
    登录并返回已登录的page：
    - 打开登录页，填写账号密码，提交
    - 校验跳转到inventory页，未跳转直接抛出 NavigationTimeout
    - 等待商品列表渲染出来，否则抛出 ElementUnavailable（之后读取的商品数量才可信）
    """
    urls = urls or URLS[ENV]
    login_page = LoginPage(page, **page_options)
    inventory_page = InventoryPage(page, **page_options)
    with allure.step(f"登录：{credentials.username}"):
        login_page.open_login(urls["login"])
        login_page.login(credentials.username, credentials.password)
        login_page.wait_url(URL_PATTERNS["inventory"])
        inventory_page.wait_visible(inventory_page.item_product.first, INVENTORY_LOCATORS["item_product"])
    logger.info("登录成功：%s -> %s", credentials.username, login_page.current_url)
    return page
