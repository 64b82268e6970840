"""
离线单元测试用的storefront替身：
只实现pages用到的那部分 Playwright Page / Locator 接口，按URL渲染 Swag Labs 的各个页面
"""
from urllib.parse import urljoin, urlparse

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from config.locators import LOGIN_LOCATORS, INVENTORY_LOCATORS, CART_LOCATORS, CHECKOUT_LOCATORS

BASE_URL = "https://www.saucedemo.com/"

CATALOG = [
    "Sauce Labs Backpack",
    "Sauce Labs Bike Light",
    "Sauce Labs Bolt T-Shirt",
    "Sauce Labs Fleece Jacket",
    "Sauce Labs Onesie",
    "Test.allTheThings() T-Shirt (Red)",
]

COMPLETE_HEADER = "Thank you for your order!"
COMPLETE_TEXT = "Your order has been dispatched, and will arrive just as fast as the pony can get there!"


class FakeElement:
    def __init__(self, text: str = "", on_click=None, on_fill=None, children: dict = None):
        self.text = text
        self.on_click = on_click
        self.on_fill = on_fill
        self.children = children or {}

    def select(self, selector: str) -> list:
        return self.children.get(selector, [])


class FakeLocator:
    def __init__(self, storefront, resolve, description: str):
        self.storefront = storefront
        self._resolve = resolve
        self.description = description

    def __str__(self):
        return self.description

    # ========= 定位 =========
    def locator(self, selector: str) -> "FakeLocator":
        return FakeLocator(self.storefront,
                           lambda: [child for element in self._resolve() for child in element.select(selector)],
                           f"{self.description} >> {selector}")

    def nth(self, index: int) -> "FakeLocator":
        return FakeLocator(self.storefront, lambda: self._resolve()[index:index + 1],
                           f"{self.description} >> nth={index}")

    @property
    def first(self) -> "FakeLocator":
        return self.nth(0)

    # ========= 读取 =========
    def count(self) -> int:
        return len(self._resolve())

    def all_text_contents(self) -> list[str]:
        return [element.text for element in self._resolve()]

    def text_content(self, timeout=None) -> str:
        return self._single(timeout).text

    def inner_text(self, timeout=None) -> str:
        return self._single(timeout).text

    # ========= 动作 =========
    def scroll_into_view_if_needed(self, timeout=None):
        self._single(timeout)

    def wait_for(self, state="visible", timeout=None):
        # 模拟等待：重新渲染若干次，仍不存在才超时
        for _ in range(self.storefront.wait_polls):
            if self._resolve():
                return
        self._single(timeout)

    def click(self, timeout=None):
        element = self._single(timeout)
        self.storefront.actions.append(("click", self.description))
        if element.on_click:
            element.on_click()

    def fill(self, value: str, timeout=None):
        element = self._single(timeout)
        self.storefront.actions.append(("fill", self.description))
        if element.on_fill:
            element.on_fill(value)

    def _single(self, timeout) -> FakeElement:
        elements = self._resolve()
        if not elements:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for locator('{self.description}')")
        return elements[0]


class FakeStorefront:
    """
    Playwright Page 替身
    - ignore_add：点击 Add to cart 不生效的商品名称（模拟问题账号）
    - missing：从页面上移除的selector（模拟元素不存在）
    - hidden_renders：inventory页前几次渲染没有商品列表（模拟列表晚于URL渲染）
    - cart_view / overview_view：购物车页、结算页显示的商品名称，传入真实购物车，返回页面上显示的
    """

    def __init__(self, catalog=None, users=None, ignore_add=(), missing=(), complete_header=COMPLETE_HEADER,
                 complete_text=COMPLETE_TEXT, hidden_renders=0, cart_view=None, overview_view=None, wait_polls=5):
        self.url = "about:blank"
        self.catalog = list(CATALOG if catalog is None else catalog)
        self.users = users or {"standard_user": "secret_sauce"}
        self.ignore_add = set(ignore_add)
        self.missing = set(missing)
        self.complete_header = complete_header
        self.complete_text = complete_text
        self.hidden_renders = hidden_renders
        self.cart_view = cart_view
        self.overview_view = overview_view
        self.wait_polls = wait_polls

        self.cart = []
        self.added_indices = set()
        self.fields = {}
        self.login_error = ""
        self.actions = []

    # ========= Page 接口 =========
    def goto(self, url: str):
        self.url = url

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, lambda: self._render().get(selector, []), selector)

    def wait_for_url(self, pattern, timeout=None):
        if not pattern.search(self.url):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for URL {pattern.pattern}")

    # ========= 页面渲染 =========
    def _render(self) -> dict:
        screens = {
            "/": self._login_screen,
            "/inventory.html": self._inventory_screen,
            "/cart.html": self._cart_screen,
            "/checkout-step-one.html": self._step_one_screen,
            "/checkout-step-two.html": self._step_two_screen,
            "/checkout-complete.html": self._complete_screen,
        }
        render = screens.get(urlparse(self.url).path)
        dom = render() if render else {}
        return {selector: elements for selector, elements in dom.items() if selector not in self.missing}

    def _navigate(self, path: str):
        self.url = urljoin(BASE_URL, path)

    def _fill(self, field: str):
        return lambda value: self.fields.__setitem__(field, value)

    def _header(self) -> dict:
        dom = {INVENTORY_LOCATORS["shopping_cart_link"]: [FakeElement(on_click=lambda: self._navigate("cart.html"))]}
        if self.cart:
            dom[INVENTORY_LOCATORS["shopping_cart_badge"]] = [FakeElement(str(len(self.cart)))]
        return dom

    def _items(self, names, with_add_button=False) -> list:
        items = []
        for index, name in enumerate(names):
            children = {INVENTORY_LOCATORS["item_product_name"]: [FakeElement(name)]}
            if with_add_button and index not in self.added_indices:
                children[INVENTORY_LOCATORS["add_product_button"]] = [
                    FakeElement("Add to cart", on_click=lambda i=index: self.add(i))]
            items.append(FakeElement(name, children=children))
        return items

    def add(self, index: int):
        """加购第index个商品；已加购的商品不再显示Add按钮"""
        name = self.catalog[index]
        if name not in self.ignore_add:
            self.added_indices.add(index)
            self.cart.append(name)

    def _login(self):
        username, password = self.fields.get("username", ""), self.fields.get("password", "")
        if self.users.get(username) == password and username:
            self._navigate("inventory.html")
        else:
            self.login_error = "Epic sadface: Username and password do not match any user in this service"

    def _login_screen(self) -> dict:
        dom = {
            LOGIN_LOCATORS["username_input"]: [FakeElement(on_fill=self._fill("username"))],
            LOGIN_LOCATORS["password_input"]: [FakeElement(on_fill=self._fill("password"))],
            LOGIN_LOCATORS["login_button"]: [FakeElement("Login", on_click=self._login)],
        }
        if self.login_error:
            dom[LOGIN_LOCATORS["error_msg"]] = [FakeElement(self.login_error)]
        return dom

    def _inventory_screen(self) -> dict:
        dom = self._header()
        if self.hidden_renders > 0:
            self.hidden_renders -= 1
            return dom
        dom[INVENTORY_LOCATORS["item_product"]] = self._items(self.catalog, with_add_button=True)
        return dom

    def _cart_screen(self) -> dict:
        dom = self._header()
        cart_names = self.cart_view(list(self.cart)) if self.cart_view else self.cart
        dom[CART_LOCATORS["cart_item"]] = self._items(cart_names)
        dom[CART_LOCATORS["checkout_button"]] = [
            FakeElement("Checkout", on_click=lambda: self._navigate("checkout-step-one.html"))]
        return dom

    def _step_one_screen(self) -> dict:
        def next_step():
            if all(self.fields.get(field) for field in ("firstName", "lastName", "postalCode")):
                self._navigate("checkout-step-two.html")

        dom = self._header()
        dom.update({
            CHECKOUT_LOCATORS["firstName_input"]: [FakeElement(on_fill=self._fill("firstName"))],
            CHECKOUT_LOCATORS["lastName_input"]: [FakeElement(on_fill=self._fill("lastName"))],
            CHECKOUT_LOCATORS["postalCode_input"]: [FakeElement(on_fill=self._fill("postalCode"))],
            CHECKOUT_LOCATORS["continue_button"]: [FakeElement("Continue", on_click=next_step)],
        })
        return dom

    def _step_two_screen(self) -> dict:
        def finish():
            self.cart = []
            self.added_indices = set()
            self._navigate("checkout-complete.html")

        dom = self._header()
        overview_names = self.overview_view(list(self.cart)) if self.overview_view else self.cart
        dom[CHECKOUT_LOCATORS["item_list"]] = self._items(overview_names)
        dom[CHECKOUT_LOCATORS["finish_button"]] = [FakeElement("Finish", on_click=finish)]
        return dom

    def _complete_screen(self) -> dict:
        dom = self._header()
        dom[CHECKOUT_LOCATORS["complete_header"]] = [FakeElement(self.complete_header)]
        dom[CHECKOUT_LOCATORS["complete_text"]] = [FakeElement(self.complete_text)]
        return dom


class ScriptedRandom:
    """按给定顺序返回下标，用来复现重复抽取"""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, stop: int) -> int:
        value = self.values.pop(0)
        assert 0 <= value < stop, f"脚本下标越界：{value} not in [0, {stop})"
        return value


@pytest.fixture
def make_storefront():
    def factory(**kwargs) -> FakeStorefront:
        return FakeStorefront(**kwargs)

    return factory


@pytest.fixture
def storefront(make_storefront) -> FakeStorefront:
    return make_storefront()


@pytest.fixture
def inventory_storefront(storefront) -> FakeStorefront:
    """已登录并停留在inventory页"""
    storefront.goto(urljoin(BASE_URL, "inventory.html"))
    return storefront


@pytest.fixture
def scripted_random():
    return ScriptedRandom
