"""SubmitFlowLogsUseCase 单元测试

测试重点:
    - 输入输出一一对应、顺序一致
    - 堆栈合并规则
    - 级别/分类回退与 details 注释
    - additional_fields 合并与解析失败注释
    - 每次 log() 只 flush 一次
"""

from unittest.mock import MagicMock

import pytest

from src.application.services.log_pipeline import LogPipeline
from src.application.use_cases.submit_flow_logs import (
    FlowLogInput,
    SubmitFlowLogsUseCase,
    combine_stacktraces,
    parse_additional_fields,
)
from src.domain.services.log_transaction_context import LogTransactionContext
from src.domain.value_objects.log_category import LogCategory
from src.domain.value_objects.log_level import LogLevel
from src.infrastructure.adapters.in_memory_log_entry_repository import (
    InMemoryLogEntryRepository,
)


@pytest.fixture
def repository():
    return InMemoryLogEntryRepository()


@pytest.fixture
def mock_transaction_manager():
    return MagicMock()


@pytest.fixture
def pipeline(repository, mock_transaction_manager):
    return LogPipeline(repository=repository, transaction_manager=mock_transaction_manager)


@pytest.fixture
def use_case(pipeline):
    return SubmitFlowLogsUseCase(pipeline=pipeline)


def _submit_one(use_case, repository, request: FlowLogInput):
    (output,) = use_case.log([request])
    (entry,) = repository.list_by_transaction_id(output.transaction_id)
    return output, entry


class TestCombineStacktraces:
    def test_full_stacktrace_is_prefixed(self):
        assert combine_stacktraces("partial", "full\n") == "full\npartial"

    def test_full_stacktrace_with_blank_partial(self):
        assert combine_stacktraces(None, "full") == "full"
        assert combine_stacktraces("", "full") == "full"

    def test_blank_full_stacktrace_returns_partial(self):
        assert combine_stacktraces("partial", None) == "partial"
        assert combine_stacktraces("partial", "   ") == "partial"
        assert combine_stacktraces(None, None) is None


class TestParseAdditionalFields:
    def test_parses_json_object(self):
        assert parse_additional_fields('{"x":1,"y":"a"}') == {"x": 1, "y": "a"}

    @pytest.mark.parametrize("raw", ["not-json", "[1, 2]", '"text"', "{"])
    def test_rejects_non_objects(self, raw):
        assert parse_additional_fields(raw) is None

    @pytest.mark.parametrize(
        "raw", ['{"x": NaN}', '{"x": Infinity}', '{"x": -Infinity}', '{"x": [NaN]}']
    )
    def test_rejects_non_standard_constants(self, raw):
        assert parse_additional_fields(raw) is None

    def test_rejects_deeply_nested_input(self):
        assert parse_additional_fields("[" * 200000) is None
        assert parse_additional_fields('{"x":' * 200000) is None


class TestSubmitFlowLogsUseCase:
    def test_outputs_match_inputs_in_order(self, use_case):
        requests = [
            FlowLogInput(area="A", summary=f"s{i}", stacktrace=f"trace-{i}") for i in range(5)
        ]

        outputs = use_case.log(requests)

        assert [output.full_stacktrace for output in outputs] == [
            f"trace-{i}" for i in range(5)
        ]

    @pytest.mark.parametrize("size", [0, 1, 7])
    def test_flush_called_exactly_once_per_batch(self, size):
        pipeline = MagicMock()
        pipeline.transaction = LogTransactionContext()
        use_case = SubmitFlowLogsUseCase(pipeline=pipeline)

        outputs = use_case.log([FlowLogInput(area="A", summary="s") for _ in range(size)])

        assert len(outputs) == size
        assert pipeline.enqueue.call_count == size
        pipeline.flush.assert_called_once_with()

    def test_flush_happens_after_all_items_are_enqueued(self):
        pipeline = MagicMock()
        pipeline.transaction = LogTransactionContext()
        use_case = SubmitFlowLogsUseCase(pipeline=pipeline)

        use_case.log([FlowLogInput(area="A", summary="s") for _ in range(3)])

        call_names = [name for name, _, _ in pipeline.mock_calls]
        assert call_names == ["enqueue", "enqueue", "enqueue", "flush"]

    def test_output_echoes_combined_stacktrace(self, use_case, repository):
        output, entry = _submit_one(
            use_case,
            repository,
            FlowLogInput(area="A", summary="s", stacktrace="part", full_stacktrace="full|"),
        )

        assert output.full_stacktrace == "full|part"
        assert output.stacktrace == "full|part"
        assert entry.stacktrace == "full|part"

    def test_valid_level_is_used_without_note(self, use_case, repository):
        _, entry = _submit_one(
            use_case,
            repository,
            FlowLogInput(area="A", summary="s", details="d", level="WARNING"),
        )

        assert entry.level is LogLevel.WARNING
        assert entry.details == "d"
        assert entry.create_issue is False

    def test_error_level_requests_issue(self, use_case, repository):
        output, entry = _submit_one(
            use_case, repository, FlowLogInput(area="A", summary="s", level="ERROR")
        )

        assert entry.level is LogLevel.ERROR
        assert entry.create_issue is True
        assert len(repository.list_issues_by_transaction_id(output.transaction_id)) == 1

    @pytest.mark.parametrize("level", [None, "", "LOUD"])
    def test_unknown_level_falls_back_to_info_with_note(self, use_case, repository, level):
        _, entry = _submit_one(
            use_case, repository, FlowLogInput(area="A", summary="s", details="d", level=level)
        )

        assert entry.level is LogLevel.INFO
        assert entry.details.startswith("d\n")
        assert "Default INFO level will be used." in entry.details
        assert entry.create_issue is False

    def test_unknown_level_note_contains_given_value(self, use_case, repository):
        _, entry = _submit_one(
            use_case, repository, FlowLogInput(area="A", summary="s", level="LOUD")
        )

        assert entry.details == (
            "Unable to locate log level: LOUD. Default INFO level will be used."
        )

    def test_blank_category_defaults_silently(self, use_case, repository):
        _, entry = _submit_one(
            use_case,
            repository,
            FlowLogInput(area="A", summary="s", details="d", level="INFO", category="  "),
        )

        assert entry.category is LogCategory.FLOW
        assert entry.details == "d"

    def test_unknown_category_defaults_with_note(self, use_case, repository):
        _, entry = _submit_one(
            use_case,
            repository,
            FlowLogInput(area="A", summary="s", details="d", level="INFO", category="Bogus"),
        )

        assert entry.category is LogCategory.FLOW
        assert "Bogus" in entry.details
        assert "Default Flow category will be used." in entry.details

    def test_known_category_is_used(self, use_case, repository):
        _, entry = _submit_one(
            use_case,
            repository,
            FlowLogInput(area="A", summary="s", level="INFO", category="Integration"),
        )

        assert entry.category is LogCategory.INTEGRATION
        assert entry.details is None

    def test_additional_fields_become_attributes(self, use_case, repository):
        _, entry = _submit_one(
            use_case,
            repository,
            FlowLogInput(
                area="A",
                summary="s",
                details="d",
                level="INFO",
                additional_fields='{"x":1,"y":"a"}',
            ),
        )

        assert entry.attributes == {"x": 1, "y": "a"}
        assert entry.details == "d"

    def test_invalid_additional_fields_are_noted_in_details(self, use_case, repository):
        _, entry = _submit_one(
            use_case,
            repository,
            FlowLogInput(
                area="A", summary="s", details="d", level="INFO", additional_fields="not-json"
            ),
        )

        assert entry.attributes == {}
        assert entry.details == (
            "d\nAdditional Information (failed to parse json input to invokable): not-json."
        )

    def test_deeply_nested_additional_fields_do_not_abort_batch(self, use_case, repository):
        raw = "[" * 200000
        outputs = use_case.log(
            [
                FlowLogInput(area="A", summary="ok-entry", level="INFO"),
                FlowLogInput(
                    area="A", summary="nested", details="d", level="INFO", additional_fields=raw
                ),
            ]
        )

        entries = repository.list_by_transaction_id(outputs[0].transaction_id)
        assert [entry.summary for entry in entries] == ["ok-entry", "nested"]
        assert entries[1].attributes == {}
        assert entries[1].details.startswith(
            "d\nAdditional Information (failed to parse json input to invokable): [[["
        )

    def test_nan_additional_fields_are_noted_in_details(self, use_case, repository):
        _, entry = _submit_one(
            use_case,
            repository,
            FlowLogInput(
                area="A", summary="s", details="d", level="INFO", additional_fields='{"x": NaN}'
            ),
        )

        assert entry.attributes == {}
        assert entry.details == (
            'd\nAdditional Information (failed to parse json input to invokable): {"x": NaN}.'
        )

    def test_invalid_additional_fields_keep_previous_notes(self, use_case, repository):
        _, entry = _submit_one(
            use_case,
            repository,
            FlowLogInput(area="A", summary="s", level="LOUD", additional_fields="not-json"),
        )

        assert "Default INFO level will be used." in entry.details
        assert entry.details.endswith("invokable): not-json.")

    def test_workflow_context_and_post_processing_are_attached(self, use_case, repository):
        _, entry = _submit_one(
            use_case,
            repository,
            FlowLogInput(
                area="Accounts",
                summary="s",
                type="Backend",
                operation="Update",
                interview_id="iv-1",
                workflow_name="My_Flow",
                level="INFO",
            ),
        )

        assert entry.area == "Accounts"
        assert entry.type == "Backend"
        assert entry.operation == "Update"
        assert entry.interview_guid == "iv-1"
        assert entry.flow_api_name == "My_Flow"
        assert all(entry.post_processing.to_dict().values())

    def test_transaction_id_is_resumed(self, use_case, repository):
        output, entry = _submit_one(
            use_case, repository, FlowLogInput(area="A", summary="s", transaction_id="tx-77")
        )

        assert output.transaction_id == "tx-77"
        assert entry.transaction_id == "tx-77"

    def test_requests_without_transaction_share_started_transaction(self, use_case):
        outputs = use_case.log(
            [FlowLogInput(area="A", summary="s1"), FlowLogInput(area="A", summary="s2")]
        )

        assert outputs[0].transaction_id is not None
        assert outputs[0].transaction_id == outputs[1].transaction_id

    def test_process_flow_log_uses_explicit_context(self, use_case, pipeline):
        context = LogTransactionContext("tx-explicit")

        output = use_case.process_flow_log(FlowLogInput(area="A", summary="s"), context)

        assert output.transaction_id == "tx-explicit"
        assert pipeline.pending_count == 1
        (entry,) = pipeline.flush()
        assert entry.transaction_id == "tx-explicit"

    def test_flush_failure_propagates(self, repository):
        failing_manager = MagicMock()
        failing_manager.commit.side_effect = RuntimeError("commit failed")
        use_case = SubmitFlowLogsUseCase(
            pipeline=LogPipeline(repository=repository, transaction_manager=failing_manager)
        )

        with pytest.raises(RuntimeError, match="commit failed"):
            use_case.log([FlowLogInput(area="A", summary="s")])

        failing_manager.rollback.assert_called_once()
