"""
博客服务的自定义异常。

请求体的解析和校验错误在路由层直接转成 400，不会以异常形式抛给客户端；
这里只定义需要向上传播的内部错误。
"""


class BlogServiceError(Exception):
    """博客服务所有异常的基类。"""


class PostSerializationError(BlogServiceError):
    """帖子无法序列化为 JSON 时抛出。"""
