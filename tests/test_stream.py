import pytest

from diffsmith import PatchFailedError
from diffsmith.stream import DIFF_MODE, FULL_MODE, ResponseAccumulator

ORIGINAL = "<!DOCTYPE html>\n<html><body><h1>Hi</h1></body></html>\n"


def test_full_mode_preview_closes_open_document():
    acc = ResponseAccumulator(FULL_MODE, ORIGINAL)
    acc.feed("Sure, here is the page:\n")
    assert acc.preview() is None

    acc.feed("<!DOCTYPE html>\n<html><body>")
    assert acc.preview() == "<!DOCTYPE html>\n<html><body>\n</html>"

    acc.feed("<p>done</p></body></html>")
    assert acc.preview() == "<!DOCTYPE html>\n<html><body><p>done</p></body></html>"


def test_full_mode_finish_extracts_document():
    acc = ResponseAccumulator(FULL_MODE, ORIGINAL)
    acc.consume(["<think>plan the page</think>", "```html\n<!DOCTYPE html>\n", "<html></html>\n```"])

    result = acc.finish()

    assert result.kind == "full_document"
    assert result.document == "<!DOCTYPE html>\n<html></html>"


def test_full_mode_finish_without_document_keeps_original():
    acc = ResponseAccumulator(FULL_MODE, ORIGINAL)
    acc.feed("I cannot help with that.")

    result = acc.finish()

    assert result.kind == "unchanged"
    assert result.document == ORIGINAL


def test_diff_mode_applies_on_complete_text():
    acc = ResponseAccumulator(DIFF_MODE, ORIGINAL)
    chunks = ["<<<<<<< SEA", "RCH\n<h1>Hi</h1>\n===", "====\n<h1>Hello</h1>\n>>>>>>> REPLACE\n"]
    acc.consume(chunks)

    assert acc.preview() is None
    result = acc.finish()

    assert result.kind == "diff"
    assert result.document == "<!DOCTYPE html>\n<html><body><h1>Hello</h1></body></html>\n"


def test_diff_mode_passes_thresholds_through():
    acc = ResponseAccumulator(DIFF_MODE, ORIGINAL, match_threshold=0.0)
    acc.feed("<<<<<<< SEARCH\n<h1>Hi  </h1>\n=======\n<h1>Hello</h1>\n>>>>>>> REPLACE\n")

    with pytest.raises(PatchFailedError):
        acc.finish()


def test_consume_stops_quietly_on_disconnect():
    seen = []

    def chunks():
        for c in ["a", "b", "c", "d"]:
            seen.append(c)
            yield c

    acc = ResponseAccumulator(DIFF_MODE, ORIGINAL)
    acc.consume(chunks(), is_disconnected=lambda: len(seen) > 2)

    assert acc.disconnected
    assert acc.text == "ab"


def test_invalid_mode():
    with pytest.raises(ValueError):
        ResponseAccumulator("partial")
