"""统一业务异常模型。

所有跨模块抛出的业务级错误都应该继承自 BusinessError，
便于在 Dispatcher 层做统一捕获，并转换成带 isError 标记的工具结果。
"""


class BusinessError(Exception):
    """业务异常基类。

    Attributes:
        code: 机器可读错误码（如 "MISSING_ARGUMENT"）。
        message: 用户可读错误信息。
        http_status: 映射到 HTTP 时可用的状态码，默认 400。
        extra: 其他补充字段（例如 tool、object_kind 等）。
    """

    def __init__(self, code: str, message: str, http_status: int = 400, **extra):
        self.code = code
        self.message = message
        self.http_status = http_status
        self.extra = extra
        super().__init__(message)


class ConfigurationError(BusinessError):
    """启动配置错误，例如缺少 HubSpot 凭证。进程无法继续运行。"""


class ValidationError(BusinessError):
    """工具参数校验失败（缺少必填参数）。"""


class UnknownToolError(BusinessError):
    """工具名未注册或 handler 不认识该工具。"""


class NetworkError(BusinessError):
    """网络层错误，例如连接失败、超时等。"""


class ApiError(BusinessError):
    """HubSpot API 返回非 2xx 错误时抛出。"""


class AuthenticationError(ApiError):
    """凭证无效或权限不足（401/403）。"""


class NotFoundError(ApiError):
    """CRM 记录不存在（404）。"""


class RateLimitError(BusinessError):
    """HubSpot 限流错误。本项目不做重试/退避，直接上报给调用方。"""
