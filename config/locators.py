LOGIN_LOCATORS = {
    "username_input": "[data-test='username']",  # 用户名
    "password_input": "[data-test='password']",  # 用户密码
    "login_button": "[data-test='login-button']",  # 登录按钮
    "error_msg": "[data-test='error']",  # 登录错误提示信息
}

INVENTORY_LOCATORS = {
    "item_product": "[data-test='inventory-item']",  # 商品列表
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "add_product_button": "[data-test^='add-to-cart']",  # 单商品add按钮
    "shopping_cart_badge": "[data-test='shopping-cart-badge']",  # 购物车角标数字
    "shopping_cart_link": "[data-test='shopping-cart-link']",  # 购物车icon
}

CART_LOCATORS = {
    "cart_item": "[data-test='inventory-item']",  # 购物车商品列表
    "cart_item_name": "[data-test='inventory-item-name']",  # 购物车单商品名称
    "checkout_button": "[data-test='checkout']",  # 结算按钮
}

CHECKOUT_LOCATORS = {
    # 收货人信息
    "firstName_input": "[data-test='firstName']",  # firstName输入框
    "lastName_input": "[data-test='lastName']",  # lastName输入框
    "postalCode_input": "[data-test='postalCode']",  # postalCode输入框
    "continue_button": "[data-test='continue']",  # 继续按钮

    # --------checkout_step_two.html---------
    "item_list": "[data-test='inventory-item']",  # 订单确认页面商品列表
    "item_product_name": "[data-test='inventory-item-name']",  # 单商品名称
    "finish_button": "[data-test='finish']",  # 完成按钮

    # --------checkout_complete.html---------
    "complete_header": "[data-test='complete-header']",  # 完成页面标题
    "complete_text": "[data-test='complete-text']",  # 完成页面发货提示
}
