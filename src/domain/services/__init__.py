"""Domain Services 模块

领域服务：
- LogEntryBuilder: 日志条目的流式构建器
- LogTransactionContext: 日志事务上下文
- log_messages: 回退注释模板与格式化
"""
