import logging
import textwrap

from diffsmith.extract import contains_marker, parse_blocks
from diffsmith.models import EditBlock


def test_single_block():
    text = textwrap.dedent("""\
        <<<<<<< SEARCH
            <h1>Old Title</h1>
        =======
            <h1>New Title</h1>
        >>>>>>> REPLACE
    """)

    blocks = parse_blocks(text)

    assert blocks == [EditBlock(search="    <h1>Old Title</h1>", replace="    <h1>New Title</h1>")]


def test_multiple_blocks_keep_order_and_ignore_prose():
    text = textwrap.dedent("""\
        Sure! I'll update the title and add a script.

        ```
        <<<<<<< SEARCH
        <h1>Old</h1>
        =======
        <h1>New</h1>
        >>>>>>> REPLACE

        Now the script:

        <<<<<<< SEARCH
          </body>
        =======
            <script>console.log("hi");</script>
          </body>
        >>>>>>> REPLACE
        ```
        Let me know if you need anything else.
    """)

    blocks = parse_blocks(text)

    assert len(blocks) == 2
    assert blocks[0].search == "<h1>Old</h1>"
    assert blocks[0].replace == "<h1>New</h1>"
    assert blocks[1].search == "  </body>"
    assert blocks[1].replace == '    <script>console.log("hi");</script>\n  </body>'


def test_markers_tolerate_surrounding_whitespace():
    text = "  <<<<<<< SEARCH  \na\n\t=======\nb\n>>>>>>> REPLACE   \n"

    assert parse_blocks(text) == [EditBlock(search="a", replace="b")]


def test_empty_search_and_empty_replace():
    text = textwrap.dedent("""\
        <<<<<<< SEARCH
        =======
        <meta charset="utf-8">
        >>>>>>> REPLACE
        <<<<<<< SEARCH
          <p>This paragraph will be deleted.</p>
        =======

        >>>>>>> REPLACE
    """)

    insertion, deletion = parse_blocks(text)

    assert insertion.is_insertion and insertion.search == ""
    assert insertion.replace == '<meta charset="utf-8">'
    assert deletion.is_deletion and deletion.replace == ""
    assert deletion.search == "  <p>This paragraph will be deleted.</p>"


def test_content_whitespace_is_preserved_verbatim():
    text = "<<<<<<< SEARCH\n\tindented  \r\n\n  two\n=======\n  x  \n>>>>>>> REPLACE"

    (block,) = parse_blocks(text)

    assert block.search == "\tindented  \r\n\n  two"
    assert block.replace == "  x  "


def test_marker_lookalikes_inside_content_are_kept():
    text = textwrap.dedent("""\
        <<<<<<< SEARCH
        <p>==== not a divider ====</p>
        >>>>>>> REPLACE is only a terminator on its own line
        =======
        =======
        >>>>>>> REPLACE
    """)

    (block,) = parse_blocks(text)

    assert block.search == "<p>==== not a divider ====</p>\n>>>>>>> REPLACE is only a terminator on its own line"
    # A second divider inside the replacement is ordinary content.
    assert block.replace == "======="


def test_block_missing_divider_is_dropped_and_next_block_recovered():
    text = textwrap.dedent("""\
        <<<<<<< SEARCH
        <p>broken block, no divider</p>

        <<<<<<< SEARCH
        <p>good</p>
        =======
        <p>better</p>
        >>>>>>> REPLACE
    """)

    blocks = parse_blocks(text)

    assert blocks == [EditBlock(search="<p>good</p>", replace="<p>better</p>")]


def test_block_missing_terminator_is_dropped_and_next_block_recovered():
    text = textwrap.dedent("""\
        <<<<<<< SEARCH
        a
        =======
        b
        <<<<<<< SEARCH
        c
        =======
        d
        >>>>>>> REPLACE
    """)

    assert parse_blocks(text) == [EditBlock(search="c", replace="d")]


def test_unterminated_trailing_block_keeps_earlier_blocks():
    text = "<<<<<<< SEARCH\na\n=======\nb\n>>>>>>> REPLACE\n<<<<<<< SEARCH\nc\n=======\nd\n"

    assert parse_blocks(text) == [EditBlock(search="a", replace="b")]


def test_no_blocks():
    assert parse_blocks("") == []
    assert parse_blocks("Just some prose, no edits here.") == []
    assert parse_blocks("<<<<<<< SEARCH\nnever closed") == []


def test_parse_gap_is_logged_when_enabled(caplog):
    with caplog.at_level(logging.WARNING):
        blocks = parse_blocks("<<<<<<< SEARCH\nnever closed\n", log=True)

    assert blocks == []
    assert any("Malformed block" in rec.message for rec in caplog.records)


def test_parse_gap_is_silent_by_default(caplog):
    with caplog.at_level(logging.DEBUG):
        parse_blocks("<<<<<<< SEARCH\nnever closed\n")

    assert not caplog.records


def test_contains_marker():
    assert contains_marker("text\n=======\nmore")
    assert contains_marker("inline >>>>>>> REPLACE marker")
    assert not contains_marker("<html></html>")
