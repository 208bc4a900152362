from tracker_service.logging_config import replace_newlines_processor


def test_replace_newlines_processor_keeps_values_on_one_line():
    event_dict = {
        "event": "report rejected",
        "error": "bad\npayload\r\n",
        "slices": ["a\tb", 3],
        "details": {"cause": "line1\nline2", "actual": 9},
    }

    result = replace_newlines_processor(None, "info", event_dict)

    assert result["event"] == "report rejected"
    assert result["error"] == "bad\\npayload\\r\\n"
    assert result["slices"] == ["a\\tb", 3]
    assert result["details"] == {"cause": "line1\\nline2", "actual": 9}
