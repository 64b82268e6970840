from playwright.sync_api import Page

from config.locators import CHECKOUT_LOCATORS
from pages.base_page import BasePage


class CheckOutPage(BasePage):
    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        #  step one 收货人信息
        self.firstName_input = page.locator(CHECKOUT_LOCATORS["firstName_input"])  # firstName输入框
        self.lastName_input = page.locator(CHECKOUT_LOCATORS["lastName_input"])  # lastName输入框
        self.postalCode_input = page.locator(CHECKOUT_LOCATORS["postalCode_input"])  # postalCode输入框
        self.continue_button = page.locator(CHECKOUT_LOCATORS["continue_button"])  # 继续按钮

        #  step two 商品信息
        self.item_product = page.locator(CHECKOUT_LOCATORS["item_list"])
        self.finish_button = page.locator(CHECKOUT_LOCATORS["finish_button"])  # 完成按钮

        # complete 完成页
        self.complete_header = page.locator(CHECKOUT_LOCATORS["complete_header"])
        self.complete_text = page.locator(CHECKOUT_LOCATORS["complete_text"])

    # ========== 页面行为 ==========
    def submit_details(self, first_name: str, last_name: str, postal_code: str):
        """填写收货人信息并点击continue"""
        self.fill(self.firstName_input, first_name, CHECKOUT_LOCATORS["firstName_input"])
        self.fill(self.lastName_input, last_name, CHECKOUT_LOCATORS["lastName_input"])
        self.fill(self.postalCode_input, postal_code, CHECKOUT_LOCATORS["postalCode_input"])
        self.click(self.continue_button, CHECKOUT_LOCATORS["continue_button"])

    def confirm_order(self):
        """点击Checkout-step-two页面finish按钮"""
        self.click(self.finish_button, CHECKOUT_LOCATORS["finish_button"])

    # ================= 数据获取 =================
    def get_overview_item_count(self) -> int:
        return self.get_count(self.item_product)

    def get_overview_item_names(self) -> list[str]:
        return self.get_texts(self.item_product.locator(CHECKOUT_LOCATORS["item_product_name"]))

    def get_confirmation_header(self) -> str:
        return self.text_or_default(self.complete_header, "")

    def get_confirmation_text(self) -> str:
        return self.text_or_default(self.complete_text, "")
