from utils.exceptions import AssertionFailed


class FlowAssert:
    """checkout流程各阶段的guard，不成立时抛出 AssertionFailed(预期, 实际)"""

    @staticmethod
    def added_count(added_items: list, expect_count: int):
        """随机加购数量 = min(请求数量, 商品总数)"""
        if len(added_items) != expect_count:
            raise AssertionFailed("加购商品数量错误", expect_count, len(added_items))

    @staticmethod
    def cart_badge(actual: str, added_items: list):
        """购物车角标数字 = 加购数量"""
        if actual != str(len(added_items)):
            raise AssertionFailed("购物车角标显示的加购商品数量错误", str(len(added_items)), actual)

    @staticmethod
    def cart_count(actual: int, added_items: list):
        if actual != len(added_items):
            raise AssertionFailed("购物车页面商品数量 != 已加购商品数量", len(added_items), actual)

    @staticmethod
    def cart_contains(added_items: list, cart_names: list, strict: bool = False):
        """加购商品都在购物车中；strict时购物车也不能有多余商品"""
        missing = [name for name in added_items if name not in cart_names]
        if missing:
            raise AssertionFailed("inventory加购的商品在购物车页面不存在", added_items, cart_names)
        if strict:
            extra = [name for name in cart_names if name not in added_items]
            if extra:
                raise AssertionFailed("购物车页面存在未加购的商品", added_items, cart_names)

    @staticmethod
    def overview_count(actual: int, added_items: list):
        if actual != len(added_items):
            raise AssertionFailed("结算页面商品数量 != 已加购商品数量", len(added_items), actual)

    @staticmethod
    def overview_contains(added_items: list, overview_names: list):
        """加购商品都出现在结算页"""
        missing = [name for name in added_items if name not in overview_names]
        if missing:
            raise AssertionFailed("inventory加购的商品在结算页面不存在", added_items, overview_names)

    @staticmethod
    def header_equal(actual: str, expect: str):
        if actual != expect:
            raise AssertionFailed("完成页标题错误", expect, actual)

    @staticmethod
    def text_contains(actual: str, expect: str):
        if expect not in actual:
            raise AssertionFailed("完成页提示信息不包含预期文案", expect, actual)
