"""数据库引擎配置

设计说明：
- 使用 create_engine 创建同步引擎（Repository 与路由均为同步实现）
- 从配置文件读取 database_url；异步驱动后缀（+aiosqlite）仅供 Alembic 使用
- 配置 echo 参数（开发环境打印 SQL）
"""

from collections.abc import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.config import settings


def get_sync_engine() -> Engine:
    """创建同步数据库引擎

    配置说明：
    - echo: 是否打印 SQL
    - pool_pre_ping: 连接前检查（避免使用失效连接）
    - SQLite 需要关闭 check_same_thread（FastAPI 同步路由在线程池中运行）

    返回：
        Engine: 同步数据库引擎
    """
    # sqlite+aiosqlite:///... → sqlite:///...
    sync_url = settings.database_url.replace("+aiosqlite", "")

    connect_args = {"check_same_thread": False} if sync_url.startswith("sqlite") else {}
    return create_engine(
        sync_url,
        echo=settings.debug,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


# 全局同步引擎实例
sync_engine = get_sync_engine()

# 创建 Session 工厂
SessionLocal = sessionmaker(
    bind=sync_engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)


def get_db_session() -> Generator[Session, None, None]:
    """获取数据库会话

    FastAPI 依赖注入函数：
    - 为每个请求创建新的 Session
    - 请求结束后自动关闭 Session（无论成功还是失败）

    Yields:
        Session: 数据库会话
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
