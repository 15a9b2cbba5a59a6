"""
配置管理模块 - 使用 Pydantic BaseSettings
支持从环境变量和配置文件加载配置
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from todo_service.constants import BackendKind, DatabaseConfig, LogConfig


def load_config_file(config_path: str):
    """
    从配置文件加载配置（支持 .env 和 YAML）

    Args:
        config_path: 配置文件路径
    """
    if config_path.endswith('.env'):
        from dotenv import load_dotenv
        load_dotenv(config_path, override=True)

    elif config_path.endswith(('.yml', '.yaml')):
        import yaml
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}
            for key, value in config_data.items():
                os.environ[key.upper()] = str(value)

    else:
        raise ValueError(f"不支持的配置文件类型: {config_path}")

    # 清除缓存，使新的环境变量生效
    get_settings.cache_clear()


class Settings(BaseSettings):
    """应用配置 - 使用 Pydantic 自动验证和类型转换"""

    # ========== 应用基础配置 ==========
    app_name: str = Field(default="Todo Service", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    app_description: str = Field(default="待办事项管理服务", alias="APP_DESCRIPTION")
    debug: bool = Field(default=False, alias="DEBUG")

    # ========== API 服务配置 ==========
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=3000, alias="API_PORT")
    api_prefix: str = Field(default="", alias="API_PREFIX")

    # ========== 存储后端配置 ==========
    backend: BackendKind = Field(default=BackendKind.MEMORY, alias="TODO_BACKEND")

    # ========== 数据库配置 ==========
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    db_pool_size: int = Field(default=DatabaseConfig.POOL_SIZE, alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=DatabaseConfig.MAX_OVERFLOW, alias="DB_MAX_OVERFLOW")
    db_pool_timeout: int = Field(default=DatabaseConfig.POOL_TIMEOUT, alias="DB_POOL_TIMEOUT")
    db_echo: bool = Field(default=False, alias="DB_ECHO")
    db_create_tables: bool = Field(default=True, alias="DB_CREATE_TABLES")

    # ========== 日志配置 ==========
    logs_dir: str = Field(default="logs", alias="LOGS_DIR")
    logs_name: str = Field(default="todo_service.log", alias="LOGS_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_to_file: bool = Field(default=False, alias="LOG_TO_FILE")
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")
    log_max_bytes: int = Field(default=10, alias="LOG_MAX_BYTES")

    @property
    def log_max_bytes_in_bytes(self) -> int:
        """日志文件最大字节数"""
        return self.log_max_bytes * 1024 * 1024

    @property
    def logs_path(self) -> Path:
        """获取日志目录绝对路径"""
        root_path = Path(__file__).parent.parent.parent
        return root_path / self.logs_dir

    # ========== 验证器 ==========
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """验证日志级别"""
        v = v.upper()
        if v not in LogConfig.LEVELS:
            raise ValueError(f'日志级别必须是以下之一: {LogConfig.LEVELS}')
        return v

    @field_validator('api_port')
    @classmethod
    def validate_port(cls, v: int) -> int:
        """验证端口号"""
        if not 1 <= v <= 65535:
            raise ValueError('端口号必须在 1-65535 之间')
        return v

    @field_validator('backend', mode='before')
    @classmethod
    def normalize_backend(cls, v):
        """后端类型不区分大小写"""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('database_url')
    @classmethod
    def empty_url_is_unset(cls, v: Optional[str]) -> Optional[str]:
        """空字符串视为未配置"""
        if v is not None and not v.strip():
            return None
        return v

    @field_validator('db_pool_size', 'db_pool_timeout')
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError('连接池参数必须大于 0')
        return v

    class Config:
        """Pydantic 配置"""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
        populate_by_name = True  # 支持别名


@lru_cache()
def get_settings() -> Settings:
    """获取配置单例"""
    return Settings()
