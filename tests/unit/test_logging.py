import json
import logging

import pytest

from forumserver.core.logging import JsonFormatter, ServiceFieldFilter


@pytest.mark.unit
def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("forumserver.test", logging.ERROR, __file__, 1, "Failed to access database", None, None)
    record.operation = "get_thread"
    record.store_error = "not_found"
    ServiceFieldFilter("forumserver").filter(record)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "ERROR"
    assert payload["message"] == "Failed to access database"
    assert payload["logger"] == "forumserver.test"
    assert payload["operation"] == "get_thread"
    assert payload["store_error"] == "not_found"
    assert payload["service"] == "forumserver"
