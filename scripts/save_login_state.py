from pathlib import Path

from playwright.sync_api import sync_playwright

from config.pages import URLS, ENV, is_headless
from data.login_data import Credentials, SAVE_LOGIN_STATE_PATH, SAVE_LOGIN_STATE_FILE
from flows.session_bootstrap import authenticate


def save_login_state(credentials: Credentials = None) -> Path:
    """生成登录态
        单独执行该脚本命令：python -m scripts.save_login_state
    """
    credentials = credentials or Credentials.from_env()
    login_path = Path(SAVE_LOGIN_STATE_PATH) / SAVE_LOGIN_STATE_FILE

    with sync_playwright() as p:
        headless = is_headless()  # CI特殊配置
        browser = p.chromium.launch(headless=headless)
        context = browser.new_context()
        try:
            page = context.new_page()
            authenticate(page, credentials, URLS[ENV])

            login_path.parent.mkdir(exist_ok=True)  # 确保storage目录一直存在
            context.storage_state(path=str(login_path))  # 保存登录态到login.json
        finally:
            context.close()
            browser.close()

    # 再次校验文件
    if not login_path.exists() or login_path.stat().st_size == 0:
        raise RuntimeError("‼️ login.json生成失败，请检查浏览器或账号")
    print(f"✅ login.json 已生成 -> {login_path}")
    return login_path


if __name__ == "__main__":
    save_login_state()
