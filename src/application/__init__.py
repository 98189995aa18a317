"""应用层 - 用例编排、事务边界、UoW

Application 层职责：
1. 用例编排：协调 Domain 值对象、构建器与日志管道
2. 事务边界：日志管道 flush 时 commit，失败时 rollback

使用示例：
>>> from src.application.services.log_pipeline import LogPipeline
>>> from src.application.use_cases import FlowLogInput, SubmitFlowLogsUseCase
>>>
>>> pipeline = LogPipeline(repository=repo, transaction_manager=tx_manager)
>>> use_case = SubmitFlowLogsUseCase(pipeline=pipeline)
>>> outputs = use_case.log([FlowLogInput(area="Accounts", summary="Updated")])
"""
