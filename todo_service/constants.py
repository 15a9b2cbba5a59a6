"""
全局常量定义
集中管理系统中使用的各种常量，避免魔法数字和字符串散布在代码中
"""

from enum import Enum


class BackendKind(str, Enum):
    """存储后端类型"""
    MEMORY = "memory"       # 进程内存储，重启后数据丢失
    DATABASE = "database"   # 关系型数据库存储


class DatabaseConfig:
    """数据库配置常量"""
    # 待办表名
    TODO_TABLE = "todos"
    # 默认连接池大小
    POOL_SIZE = 5
    # 连接池溢出上限
    MAX_OVERFLOW = 10
    # 等待连接超时时间（秒）
    POOL_TIMEOUT = 30
    # 待办ID取值范围（int32）
    ID_MIN = -2 ** 31
    ID_MAX = 2 ** 31 - 1


class ValidationConfig:
    """验证配置常量"""
    # 待办内容最小/最大长度（按字符计）
    TEXT_MIN_LENGTH = 1
    TEXT_MAX_LENGTH = 100
    # 校验失败原因
    TEXT_EMPTY_REASON = "Can not be empty"
    TEXT_TOO_LONG_REASON = "Over text length"


class LogConfig:
    """日志配置常量"""
    # 日志格式
    FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    # 日期格式
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
    # 合法的日志级别
    LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
