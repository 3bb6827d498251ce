"""异常类型定义。"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """错误类别，便于调用方按类别而不是按消息文本判断。"""

    CONFIG = "config"
    PERSIST = "persist"
    TOKEN = "token"
    TRANSPORT = "transport"
    FETCH = "fetch"
    DECODE = "decode"
    TIME = "time"
    NOTIFY = "notify"


class NotifierError(Exception):
    """所有业务异常的基类。"""

    kind: ErrorKind


class ConfigError(NotifierError):
    """配置或 JSON 文件无法读取。"""

    kind = ErrorKind.CONFIG


class PersistError(NotifierError):
    """JSON 文件写入失败。"""

    kind = ErrorKind.PERSIST


class TokenError(NotifierError):
    """Trakt 访问令牌无效或刷新失败。"""

    kind = ErrorKind.TOKEN


class TransportError(NotifierError):
    """网络层失败（DNS、连接被拒、超时），与非 2xx 响应区分开。"""

    kind = ErrorKind.TRANSPORT


class FetchError(NotifierError):
    """日历接口未返回可用数据。"""

    kind = ErrorKind.FETCH


class DecodeError(NotifierError):
    """响应体不是合法的 JSON 或结构不符合预期。"""

    kind = ErrorKind.DECODE


class TimeError(NotifierError):
    """时间戳格式错误或时区标识未知。"""

    kind = ErrorKind.TIME


class NotifyError(NotifierError):
    """通知消息无法构建或编码。"""

    kind = ErrorKind.NOTIFY
