"""LogLevel 单元测试"""

import pytest

from src.domain.value_objects.log_level import LogLevel


class TestLogLevelParse:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("ERROR", LogLevel.ERROR),
            ("warning", LogLevel.WARNING),
            ("  Info  ", LogLevel.INFO),
            ("FINEST", LogLevel.FINEST),
        ],
    )
    def test_parse_known_levels(self, raw, expected):
        assert LogLevel.parse(raw) is expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "CRITICAL", "ERR"])
    def test_parse_blank_or_unknown_returns_none(self, raw):
        assert LogLevel.parse(raw) is None

    def test_only_error_creates_issue(self):
        assert LogLevel.ERROR.creates_issue() is True
        assert not any(level.creates_issue() for level in LogLevel if level is not LogLevel.ERROR)

    def test_level_is_str_friendly(self):
        assert LogLevel.WARNING == "WARNING"
