"""Pytest 配置文件 - 全局 fixtures"""

import os

import pytest

# 在导入 src.config 之前指定测试数据库，避免在工作目录生成 SQLite 文件
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENV", "test")


@pytest.fixture
def sample_flow_log_data() -> dict:
    """示例工作流日志请求（camelCase，与工作流引擎一致）"""
    return {
        "area": "Accounts",
        "summary": "Account owner updated",
        "details": "Owner changed by assignment flow",
        "type": "Backend",
        "operation": "UpdateOwner",
        "category": "Flow",
        "level": "INFO",
        "interviewId": "interview-0001",
        "workflowName": "Account_Owner_Assignment",
    }
