import pytest

from src.date_tasks.date_tasks.core.enums import DateFormat
from src.date_tasks.date_tasks.core.exceptions import ValidationError
from src.date_tasks.date_tasks.parsing.factory import DateParserFactory
from src.date_tasks.date_tasks.parsing.iso8601_parser import Iso8601Parser
from src.date_tasks.date_tasks.parsing.rfc2822_parser import Rfc2822Parser


def test_factory_picks_parser_for_format():
    factory = DateParserFactory()

    assert isinstance(factory.for_format(DateFormat.RFC_2822), Rfc2822Parser)
    assert isinstance(factory.for_format(DateFormat.ISO_8601), Iso8601Parser)


def test_factory_accepts_format_value():
    assert isinstance(DateParserFactory().for_format("ISO_8601"), Iso8601Parser)


def test_factory_rejects_unknown_format():
    with pytest.raises(ValidationError):
        DateParserFactory().for_format("RFC_3339")
