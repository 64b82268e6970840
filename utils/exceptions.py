"""checkout流程中的致命错误：定位不到元素、页面未跳转、断言不成立"""


class CheckoutFlowError(Exception):
    """所有流程错误的基类，RunOutcome只转换这一类"""


class ElementUnavailable(CheckoutFlowError):
    def __init__(self, selector: str, action: str, detail: str = ""):
        self.selector = selector
        self.action = action
        message = f"元素不可用：{action} -> {selector}"
        if detail:
            message += f"（{detail}）"
        super().__init__(message)


class NavigationTimeout(CheckoutFlowError):
    def __init__(self, pattern: str, actual_url: str):
        self.pattern = pattern
        self.actual_url = actual_url
        super().__init__(f"页面未跳转到 {pattern}，当前URL：{actual_url}")


class AssertionFailed(CheckoutFlowError, AssertionError):
    """guard不成立，带上预期值和实际值"""

    def __init__(self, guard: str, expected, actual):
        self.guard = guard
        self.expected = expected
        self.actual = actual
        super().__init__(f"{guard}：预期 {expected!r}，实际 {actual!r}")
