"""应用配置模块

使用 Pydantic Settings 管理应用配置，支持从 .env 文件加载环境变量
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """应用配置类"""

    # 应用配置
    APP_TITLE: str = "Shopfloor"
    APP_DESCRIPTION: str = "Manufacturing operations API"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # 行存储后端: "sql" (本地开发/测试) 或 "sheets" (Google Sheets)
    STORE_BACKEND: str = "sql"

    # 数据库配置 - 仅 sql 后端使用
    DATABASE_URL: str = ""
    ECHO_SQL: bool = False  # 是否打印SQL日志

    # Google Sheets 配置
    GOOGLE_SPREADSHEET_ID: str = ""
    GOOGLE_API_KEY: str = ""
    GOOGLE_ACCESS_TOKEN: Optional[str] = None
    SHEETS_BASE_URL: str = "https://sheets.googleapis.com/v4/spreadsheets"
    HTTP_TIMEOUT: float = 10.0

    # 读缓存有效期（秒）
    CACHE_TTL_SECONDS: float = 5.0

    # 生产策略常量
    PLANNED_LEAD_DAYS: int = 14
    PROCESS_ESTIMATED_MINUTES: int = 60

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # 如果没有显式设置DATABASE_URL，使用本地sqlite
        if not self.DATABASE_URL:
            self.DATABASE_URL = "sqlite:///./dev.db"

    class Config:
        env_file = ".env"  # 从.env文件加载配置


# 创建全局配置实例
settings = Settings()
