"""FastAPI 应用入口"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from src.config import settings
from src.infrastructure.database.schema import ensure_sqlite_schema
from src.interfaces.api.container import ApiContainer
from src.interfaces.api.routes import flow_logs, health, log_entries


def _build_container() -> ApiContainer:
    def log_entry_repository(session: Session):
        from src.infrastructure.database.repositories.log_entry_repository import (
            SQLAlchemyLogEntryRepository,
        )

        return SQLAlchemyLogEntryRepository(session)

    def transaction_manager(session: Session):
        from src.infrastructure.database.transaction_manager import (
            SQLAlchemyTransactionManager,
        )

        return SQLAlchemyTransactionManager(session)

    return ApiContainer(
        log_entry_repository=log_entry_repository,
        transaction_manager=transaction_manager,
    )


def _get_display_host() -> str:
    """Return a host suitable for displaying in links."""
    if settings.host in {"0.0.0.0", "::"}:
        return "127.0.0.1"
    return settings.host


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    display_host = _get_display_host()
    print(f"[*] {settings.app_name} v{settings.app_version} 启动中...")
    print(f"[ENV] 环境: {settings.env}")
    print(f"[DB] 数据库: {settings.database_url}")
    print(f"[URL] 服务地址: http://{display_host}:{settings.port}")
    print(f"[DOCS] API 文档: http://{display_host}:{settings.port}/docs")

    try:
        ensure_sqlite_schema()
    except Exception as exc:  # pragma: no cover - best effort startup helper
        print(f"[DB] 数据库初始化失败（请运行 Alembic 迁移）: {exc}")

    app.state.container = _build_container()

    try:
        yield
    finally:
        print(f"[SHUTDOWN] {settings.app_name} 关闭中...")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="低代码工作流日志接入服务",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
async def health_check() -> JSONResponse:
    return JSONResponse(
        content={
            "status": "healthy",
            "app_name": settings.app_name,
            "version": settings.app_version,
            "env": settings.env,
        }
    )


@app.get("/", tags=["Root"])
async def root() -> JSONResponse:
    display_host = _get_display_host()
    return JSONResponse(
        content={
            "message": f"欢迎使用 {settings.app_name}",
            "version": settings.app_version,
            "docs": f"http://{display_host}:{settings.port}/docs",
        }
    )


app.include_router(flow_logs.router, prefix="/api", tags=["Flow Logs"])
app.include_router(log_entries.router, prefix="/api", tags=["Log Entries"])
app.include_router(health.router, prefix="/api", tags=["Health"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.interfaces.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
