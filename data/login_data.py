"""登录数据：账号密码、登录态文件路径"""
import os
from dataclasses import dataclass

DEFAULT_USERNAME = "standard_user"
DEFAULT_PASSWORD = "secret_sauce"


@dataclass(frozen=True)
class Credentials:
    username: str = DEFAULT_USERNAME
    password: str = DEFAULT_PASSWORD

    @classmethod
    def from_env(cls, environ=None) -> "Credentials":
        """TEST_USERNAME / TEST_PASSWORD 未设置时使用默认账号"""
        environ = os.environ if environ is None else environ
        return cls(username=environ.get("TEST_USERNAME") or DEFAULT_USERNAME,
                   password=environ.get("TEST_PASSWORD") or DEFAULT_PASSWORD)


LOCKED_OUT_USER = Credentials("locked_out_user", DEFAULT_PASSWORD)
LOCKED_OUT_ERROR_MSG = "Sorry, this user has been locked out."

SAVE_LOGIN_STATE_PATH = "storage"
SAVE_LOGIN_STATE_FILE = "login.json"
