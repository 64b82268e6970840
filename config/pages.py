import os


def env_flag(name: str, default: bool = False, environ=None) -> bool:
    """'1'/'true'/'yes'/'on' 为True，'0'/'false'/'no'/'off'/'' 为False，未设置取默认值"""
    environ = os.environ if environ is None else environ
    value = environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def is_headless(environ=None) -> bool:
    """CI环境强制无头；本地默认无头，HEADLESS=0 时显示浏览器"""
    return env_flag("CI", environ=environ) or env_flag("HEADLESS", default=True, environ=environ)


ENV = os.getenv("TEST_ENV", "prod")

URLS = {
    "prod": {
        "login": "https://www.saucedemo.com/",
        "inventory": "https://www.saucedemo.com/inventory.html",
    },
    "local": {
        "login": "http://localhost:3000/",
        "inventory": "http://localhost:3000/inventory.html",
    },
}

# 页面跳转校验用的URL正则
URL_PATTERNS = {
    "inventory": r".*inventory\.html",
    "cart": r".*cart\.html",
    "checkout_step_one": r".*checkout-step-one\.html",
    "checkout_step_two": r".*checkout-step-two\.html",
    "checkout_complete": r".*checkout-complete\.html",
}

ACTION_TIMEOUT_MS = int(os.getenv("ACTION_TIMEOUT_MS", "10000"))  # 单个元素操作等待上限
NAVIGATION_TIMEOUT_MS = int(os.getenv("NAVIGATION_TIMEOUT_MS", "15000"))  # 页面跳转等待上限
