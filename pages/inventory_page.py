import logging

from playwright.sync_api import Page

from config.locators import INVENTORY_LOCATORS
from pages.base_page import BasePage
from utils.random_selector import RandomSelector

logger = logging.getLogger(__name__)


class InventoryPage(BasePage):
    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        # 商品列表
        self.item_product = page.locator(INVENTORY_LOCATORS["item_product"])

        # 购物车
        self.shopping_cart_badge = page.locator(INVENTORY_LOCATORS["shopping_cart_badge"])  # 购物车显示商品数
        self.shopping_cart_link = page.locator(INVENTORY_LOCATORS["shopping_cart_link"])  # 购物车icon

        self.catalog_size = None  # 最近一次 select_random 时的商品数量

    # ================= 页面行为 =================
    def open_inventory(self, inventory_url: str):
        self.open(inventory_url)
        self.wait_visible(self.item_product.first, INVENTORY_LOCATORS["item_product"])

    def select_random(self, count: int, selector: RandomSelector = None) -> list[str]:
        """
        随机加购 min(count, 商品总数) 个不重复的商品
        按抽取顺序：先读商品名称，再点击该商品的 Add to cart
        返回加购商品名称list（抽取顺序）
        """
        selector = selector or RandomSelector()
        # 商品数量只读一次，调用方用 catalog_size 做数量校验
        self.catalog_size = self.get_product_count()
        indices = selector.draw(count, self.catalog_size)
        if not indices:
            logger.info("随机加购数量为0（count=%s），跳过加购", count)
            return []

        added_names = []
        for index in indices:
            product_item = self.item_product.nth(index)
            name = self.text(product_item.locator(INVENTORY_LOCATORS["item_product_name"]),
                             f"{INVENTORY_LOCATORS['item_product_name']}[{index}]")
            self.click(product_item.locator(INVENTORY_LOCATORS["add_product_button"]),
                       f"{INVENTORY_LOCATORS['add_product_button']}[{index}]")
            added_names.append(name)
        logger.info("随机加购下标 %s -> %s", indices, added_names)
        return added_names

    def open_cart(self):
        self.click(self.shopping_cart_link, INVENTORY_LOCATORS["shopping_cart_link"])

    # ================= 数据获取 =================
    def get_product_count(self) -> int:
        return self.get_count(self.item_product)

    def get_product_names(self) -> list[str]:
        return self.get_texts(self.item_product.locator(INVENTORY_LOCATORS["item_product_name"]))

    def get_cart_badge_count(self) -> str:
        # 购物车为空时角标不存在，返回'0'
        return self.text_or_default(self.shopping_cart_badge, "0")
