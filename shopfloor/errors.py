"""异常定义

服务层抛出的所有业务异常，由 API 层统一转换为 HTTP 响应。
"""


class ShopfloorError(Exception):
    """业务异常基类"""


class NotFound(ShopfloorError):
    """update/delete/查询的目标记录不存在"""

    def __init__(self, table: str, record_id: str):
        self.table = table
        self.record_id = record_id
        super().__init__(f"Record with id {record_id} not found in {table}")


class ValidationError(ShopfloorError):
    """缺少必填字段或输入不合法"""


class InvalidTransition(ValidationError):
    """当前状态下不允许该操作"""


class OperationInProgress(ShopfloorError):
    """同一个 key 的操作正在执行"""


class StoreUnavailable(ShopfloorError):
    """行存储后端（传输层/数据库）失败"""
