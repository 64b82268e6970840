"""
完整下单流程：登录 -> 随机加购 -> 购物车校验 -> 填写收货人 -> 订单确认 -> 提交订单 -> 完成页校验

线性流程，没有分支和重试；任何一个guard不成立立即抛出，后续步骤不再执行。
每次运行只使用一个page句柄，加购商品名称list是唯一在步骤之间传递的数据。
"""
import json
import logging
from dataclasses import dataclass, field, asdict
from enum import Enum

import allure
from playwright.sync_api import Page

from assertions.flow_assert import FlowAssert
from config.pages import URLS, ENV, URL_PATTERNS
from data.checkout_data import RANDOM_PRODUCT_COUNT, FINISH_PAGE_MESSAGE, DISPATCH_MESSAGE
from data.login_data import Credentials
from flows.session_bootstrap import authenticate
from pages.cart_page import CartPage
from pages.check_out_page import CheckOutPage
from pages.inventory_page import InventoryPage
from utils.exceptions import CheckoutFlowError
from utils.fake_data import CheckoutDataFactory, CheckoutRecord
from utils.random_selector import RandomSelector

logger = logging.getLogger(__name__)


class FlowState(Enum):
    UNAUTHENTICATED = "未登录"
    AUTHENTICATED = "已登录"
    ITEMS_SELECTED = "已加购"
    CART_REVIEW = "购物车校验"
    DETAILS_ENTRY = "填写收货人信息"
    OVERVIEW = "订单确认"
    COMPLETED = "下单完成"


@dataclass
class FlowRecord:
    """单次运行收集到的数据，只属于这一次运行"""
    requested: int = 0
    catalog_size: int = None
    added_items: list[str] = field(default_factory=list)
    cart_badge: str = ""
    cart_names: list[str] = field(default_factory=list)
    checkout_record: CheckoutRecord = None
    overview_count: int = None
    overview_names: list[str] = field(default_factory=list)
    confirmation_header: str = ""
    confirmation_text: str = ""
    states: list[FlowState] = field(default_factory=lambda: [FlowState.UNAUTHENTICATED])

    @property
    def state(self) -> FlowState:
        return self.states[-1]


@dataclass
class RunOutcome:
    passed: bool
    state: FlowState
    record: FlowRecord
    failure: str = ""


class CheckoutFlow:
    def __init__(self, page: Page, credentials: Credentials, urls: dict = None,
                 data_source: CheckoutDataFactory = None, selector: RandomSelector = None,
                 strict_cart: bool = False, expected_header: str = FINISH_PAGE_MESSAGE,
                 expected_text: str = DISPATCH_MESSAGE, **page_options):
        self.page = page
        self.credentials = credentials
        self.urls = urls or URLS[ENV]
        self.data_source = data_source or CheckoutDataFactory()
        self.selector = selector or RandomSelector()
        self.strict_cart = strict_cart  # True：购物车出现未加购商品也判失败
        self.expected_header = expected_header
        self.expected_text = expected_text
        self.page_options = page_options

        self.inventory_page = InventoryPage(page, **page_options)
        self.cart_page = CartPage(page, **page_options)
        self.check_out_page = CheckOutPage(page, **page_options)
        self.record = FlowRecord()

    # ================= 执行 =================
    def run(self, count: int = RANDOM_PRODUCT_COUNT) -> FlowRecord:
        """按顺序执行所有步骤，第一个失败的guard直接抛出"""
        self.record = FlowRecord(requested=count)
        steps = [
            (FlowState.AUTHENTICATED, self._login),
            (FlowState.ITEMS_SELECTED, self._select_items),
            (FlowState.CART_REVIEW, self._review_cart),
            (FlowState.DETAILS_ENTRY, self._start_checkout),
            (FlowState.OVERVIEW, self._enter_details),
            (FlowState.COMPLETED, self._finish_order),
        ]
        for state, step in steps:
            with allure.step(f"{self.record.state.value} -> {state.value}"):
                step()
            self.record.states.append(state)
            logger.info("进入状态：%s", state.name)

        with allure.step("校验完成页文案"):
            self._verify_confirmation()
        return self.record

    def outcome(self, count: int = RANDOM_PRODUCT_COUNT) -> RunOutcome:
        """run() 的结果汇总：只有流程错误会被转换为失败结果，其它异常照常抛出"""
        try:
            record = self.run(count)
        except CheckoutFlowError as exc:
            logger.error("流程在 %s 失败：%s", self.record.state.name, exc)
            return RunOutcome(passed=False, state=self.record.state, record=self.record, failure=str(exc))
        return RunOutcome(passed=True, state=record.state, record=record)

    # ================= 步骤 =================
    def _login(self):
        authenticate(self.page, self.credentials, self.urls, **self.page_options)

    def _select_items(self):
        count = self.record.requested
        added = self.inventory_page.select_random(count, self.selector)
        self.record.added_items = added
        self.record.catalog_size = self.inventory_page.catalog_size
        allure.attach(json.dumps(added, ensure_ascii=False, indent=2), name="加购商品",
                      attachment_type=allure.attachment_type.JSON)

        FlowAssert.added_count(added, max(min(count, self.record.catalog_size), 0))
        self.record.cart_badge = self.inventory_page.get_cart_badge_count()
        FlowAssert.cart_badge(self.record.cart_badge, added)

    def _review_cart(self):
        self.inventory_page.open_cart()
        self.cart_page.wait_url(URL_PATTERNS["cart"])

        FlowAssert.cart_count(self.cart_page.get_item_count(), self.record.added_items)
        self.record.cart_names = self.cart_page.get_item_names()
        FlowAssert.cart_contains(self.record.added_items, self.record.cart_names, self.strict_cart)

    def _start_checkout(self):
        self.cart_page.proceed_to_checkout()
        self.check_out_page.wait_url(URL_PATTERNS["checkout_step_one"])

    def _enter_details(self):
        checkout_record = self.data_source.checkout_record()
        self.record.checkout_record = checkout_record
        allure.attach(json.dumps(asdict(checkout_record), ensure_ascii=False, indent=2), name="收货人信息",
                      attachment_type=allure.attachment_type.JSON)

        self.check_out_page.submit_details(checkout_record.first_name, checkout_record.last_name,
                                           checkout_record.postal_code)
        self.check_out_page.wait_url(URL_PATTERNS["checkout_step_two"])

        self.record.overview_count = self.check_out_page.get_overview_item_count()
        FlowAssert.overview_count(self.record.overview_count, self.record.added_items)
        self.record.overview_names = self.check_out_page.get_overview_item_names()
        FlowAssert.overview_contains(self.record.added_items, self.record.overview_names)

    def _finish_order(self):
        self.check_out_page.confirm_order()
        self.check_out_page.wait_url(URL_PATTERNS["checkout_complete"])

    def _verify_confirmation(self):
        self.record.confirmation_header = self.check_out_page.get_confirmation_header()
        self.record.confirmation_text = self.check_out_page.get_confirmation_text()
        FlowAssert.header_equal(self.record.confirmation_header, self.expected_header)
        FlowAssert.text_contains(self.record.confirmation_text, self.expected_text)
