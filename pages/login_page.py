from playwright.sync_api import Page

from config.locators import LOGIN_LOCATORS
from pages.base_page import BasePage


class LoginPage(BasePage):
    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.username_input = page.locator(LOGIN_LOCATORS["username_input"])  # 用户名输入框
        self.password_input = page.locator(LOGIN_LOCATORS["password_input"])  # 密码输入框
        self.login_button = page.locator(LOGIN_LOCATORS["login_button"])  # 登录按钮
        self.error_message = page.locator(LOGIN_LOCATORS["error_msg"])  # 登录校验错误提示信息

    # ================= 页面行为 =================
    def open_login(self, login_url: str):
        self.open(login_url)
        self.wait_visible(self.username_input, LOGIN_LOCATORS["username_input"])

    def login(self, username: str, password: str):
        self.fill(self.username_input, username, LOGIN_LOCATORS["username_input"])
        self.fill(self.password_input, password, LOGIN_LOCATORS["password_input"])
        self.click(self.login_button, LOGIN_LOCATORS["login_button"])

    # ================= 数据获取 =================
    def get_login_failure_message(self) -> str:
        return self.text_or_default(self.error_message)
