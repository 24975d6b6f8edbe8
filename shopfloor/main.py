"""FastAPI主应用入口

制造运营后台的 RESTful API 服务，包含销售、报价审批、生产、质检、采购、库存等模块
- 使用依赖注入获取行存储
- 业务异常统一转换为 HTTP 响应
"""

import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .api.v1 import (
    sales_router,
    proposals_router,
    production_router,
    quality_router,
    purchasing_router,
    notifications_router,
)
from .config.settings import settings
from .database.connection import Base, engine, get_db
from . import models  # noqa: F401  注册 sheet_rows 表
from .errors import (
    InvalidTransition,
    NotFound,
    OperationInProgress,
    StoreUnavailable,
    ValidationError,
)
from .log import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

# 创建FastAPI应用实例
app = FastAPI(title=settings.APP_TITLE, description=settings.APP_DESCRIPTION, version=settings.APP_VERSION)

# 挂载API路由
app.include_router(sales_router, prefix="/api/v1")
app.include_router(proposals_router, prefix="/api/v1")
app.include_router(production_router, prefix="/api/v1")
app.include_router(quality_router, prefix="/api/v1")
app.include_router(purchasing_router, prefix="/api/v1")
app.include_router(notifications_router, prefix="/api/v1")


@app.on_event("startup")
def _startup():
    # sql 后端开发环境直接建表（正式环境使用 alembic 迁移）
    if settings.STORE_BACKEND == "sql":
        Base.metadata.create_all(bind=engine)
    logger.info("%s started with %s row store", settings.APP_TITLE, settings.STORE_BACKEND)


# 业务异常处理
def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(NotFound)
async def handle_not_found(request: Request, exc: NotFound):
    return _error(404, exc)


@app.exception_handler(InvalidTransition)
async def handle_invalid_transition(request: Request, exc: InvalidTransition):
    return _error(409, exc)


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError):
    return _error(422, exc)


@app.exception_handler(OperationInProgress)
async def handle_in_progress(request: Request, exc: OperationInProgress):
    return _error(409, exc)


@app.exception_handler(StoreUnavailable)
async def handle_store_unavailable(request: Request, exc: StoreUnavailable):
    logger.error("row store unavailable on %s: %s", request.url.path, exc)
    return _error(503, exc)


# 健康检查端点
@app.get("/health/db")
def health_check(db: Session = Depends(get_db)):
    """检查数据库连接状态（sql 后端）"""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "reachable"}
    except SQLAlchemyError:
        raise HTTPException(status_code=503, detail="Database connection failed")


# 根路径 - 返回服务状态
@app.get("/")
def read_root():
    """返回服务运行状态"""
    return {"service": settings.APP_TITLE, "version": settings.APP_VERSION, "store": settings.STORE_BACKEND}
