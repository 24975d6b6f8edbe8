"""API 依赖

整个应用共用一个 RowStore（读缓存属于这个实例），测试时通过
app.dependency_overrides 替换 get_store。
"""

from functools import lru_cache

from ..config.settings import settings
from ..store import ReadCache, RowStore, build_backend


@lru_cache()
def _default_store() -> RowStore:
    return RowStore(build_backend(settings), cache=ReadCache(settings.CACHE_TTL_SECONDS))


def get_store() -> RowStore:
    """获取行存储的依赖函数"""
    return _default_store()
