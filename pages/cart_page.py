from playwright.sync_api import Page

from config.locators import CART_LOCATORS
from pages.base_page import BasePage


class CartPage(BasePage):
    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.cart_items = page.locator(CART_LOCATORS["cart_item"])  # 购物车商品列表
        self.checkout_button = page.locator(CART_LOCATORS["checkout_button"])  # 结算按钮

    # ================= 页面行为 =================
    def proceed_to_checkout(self):
        self.click(self.checkout_button, CART_LOCATORS["checkout_button"])

    # ================= 数据获取 =================
    def get_item_names(self) -> list[str]:
        return self.get_texts(self.cart_items.locator(CART_LOCATORS["cart_item_name"]))

    def get_item_count(self) -> int:
        return self.get_count(self.cart_items)
