"""checkout流程测试数据：随机加购数量、完成页文案"""

RANDOM_PRODUCT_COUNT = 3  # 默认随机加购商品数量

FINISH_PAGE_MESSAGE = "Thank you for your order!"  # 完成页标题，需完全相等
DISPATCH_MESSAGE = "Your order has been dispatched"  # 完成页正文，包含即可
