"""Tests for assembling Tag records from the lines of one file."""

import pytest

from issue_summoner.lexer import DEFAULT_REGISTRY
from issue_summoner.tag import Tag, TagDraft, scan_lines


def scan(text, syntax, annotation="@TODO", source="a.c"):
    return scan_lines(text.splitlines(keepends=True), source, annotation, syntax)


class TestBlockComments:
    """Tags seeded inside /* */ style blocks."""

    def test_two_line_block(self, c_syntax):
        tags = scan("/* @TODO refactor\n   this function later */\nint x;\n", c_syntax)

        assert tags == [Tag("@TODO", "refactor", "this function later", "a.c", 1)]

    def test_annotation_inside_block_body(self, c_syntax):
        text = (
            "int x;\n"
            "/*\n"
            " * @TODO cache results\n"
            " * lookups are slow\n"
            " */\n"
            "int y;\n"
        )
        tags = scan(text, c_syntax)

        assert len(tags) == 1
        assert tags[0].title == "cache results"
        assert tags[0].description == "* lookups are slow"
        assert tags[0].line_number == 3

    def test_one_line_block_keeps_closing_delimiter_in_title(self, c_syntax):
        tags = scan("/* @TODO one-liner */\nint x;\n", c_syntax)

        assert [t.title for t in tags] == ["one-liner */"]
        assert tags[0].description == ""

    def test_code_after_one_line_block_is_not_description(self, c_syntax):
        tags = scan("/* @TODO one-liner */\n/* unrelated */\n", c_syntax)
        assert tags[0].description == ""

    def test_block_after_one_line_block_keeps_description(self, c_syntax):
        tags = scan("/* header */\n/* @TODO refactor\n   this function later */\n", c_syntax)

        assert tags == [Tag("@TODO", "refactor", "this function later", "a.c", 2)]

    def test_block_without_annotation_produces_nothing(self, c_syntax):
        assert scan("/* license header\n   all rights reserved */\n", c_syntax) == []


class TestSingleLineComments:
    """Tags seeded on // or # lines."""

    def test_single_line_then_code(self, c_syntax):
        tags = scan("// @TODO fix bug\nint x;\n", c_syntax)
        assert tags == [Tag("@TODO", "fix bug", "", "a.c", 1)]

    def test_consecutive_comment_lines_form_description(self, c_syntax):
        text = (
            "// @TODO refactor config loading\n"
            "// shared between read and write\n"
            "//\n"
            "// paths\n"
            "func load() {}\n"
        )
        tags = scan(text, c_syntax)

        assert tags[0].title == "refactor config loading"
        assert tags[0].description == "shared between read and write\npaths"

    def test_different_comment_kind_ends_single_line_run(self, c_syntax):
        tags = scan("// @TODO first\n/* unrelated block */\n", c_syntax)
        assert tags == [Tag("@TODO", "first", "", "a.c", 1)]

    def test_next_annotation_starts_new_tag(self, c_syntax):
        tags = scan("// @TODO first\n// @TODO second\n", c_syntax)
        assert [(t.title, t.line_number) for t in tags] == [("first", 1), ("second", 2)]

    def test_annotation_without_title_is_dropped(self, c_syntax):
        assert scan("// @TODO\n// details only\n", c_syntax) == []

    def test_annotation_in_code_is_ignored(self, c_syntax):
        assert scan('log("@TODO not a comment");\n', c_syntax) == []

    def test_crlf_line_endings(self, c_syntax):
        tags = scan("// @TODO crlf\r\n// more\r\n", c_syntax)
        assert tags == [Tag("@TODO", "crlf", "more", "a.c", 1)]

    def test_tag_open_at_end_of_file_is_kept(self, c_syntax):
        tags = scan("int x;\n// @TODO last line", c_syntax)
        assert [t.title for t in tags] == ["last line"]


class TestOtherLanguages:
    """Python docstrings, hash comments and markdown."""

    def test_python_docstring(self, py_syntax):
        text = (
            "def f():\n"
            '    """\n'
            "    @TODO handle unicode\n"
            "    currently ascii only\n"
            '    """\n'
            "    return 1\n"
        )
        tags = scan(text, py_syntax, source="f.py")

        assert tags == [Tag("@TODO", "handle unicode", "currently ascii only", "f.py", 3)]

    def test_docstring_after_module_docstring(self, py_syntax):
        text = '"""Module."""\n"""\n@TODO handle unicode\ncurrently ascii only\n"""\n'
        tags = scan(text, py_syntax, source="m.py")

        assert tags == [Tag("@TODO", "handle unicode", "currently ascii only", "m.py", 3)]

    def test_code_after_second_docstring_is_not_comment(self, py_syntax):
        text = '"""One."""\n"""\nplain\n"""\nx = 1\n# @TODO real\ny = 2\n'
        tags = scan(text, py_syntax, source="m.py")

        assert [(t.title, t.description, t.line_number) for t in tags] == [("real", "", 6)]

    def test_python_hash_comment(self, py_syntax):
        tags = scan("x = 1\n# @TODO drop this\nx = 2\n", py_syntax, source="f.py")
        assert [(t.title, t.line_number) for t in tags] == [("drop this", 2)]

    def test_markdown_html_comment(self):
        md = DEFAULT_REGISTRY.syntax_for(".md")
        tags = scan("# Title\n<!-- @TODO write docs\n     for the CLI -->\n", md, source="README.md")

        assert tags == [Tag("@TODO", "write docs", "for the CLI", "README.md", 2)]

    def test_custom_annotation(self, c_syntax):
        tags = scan("// @FIXME leaks fds\n// @TODO other\n", c_syntax, annotation="@FIXME")
        assert [t.title for t in tags] == ["leaks fds"]

    def test_empty_input(self, c_syntax):
        assert scan("", c_syntax) == []


class TestTagRecord:
    """Tag and TagDraft behaviour."""

    def test_validity(self):
        assert Tag("@TODO", "x", "", "a.c", 1).is_valid()
        assert not Tag("@TODO", "   ", "desc", "a.c", 1).is_valid()

    def test_draft_skips_empty_description_lines(self):
        draft = TagDraft("@TODO", " title ", "a.c", 4)
        draft.add_description("  ")
        draft.add_description(" first ")
        draft.add_description("")
        draft.add_description("second")

        assert draft.finish() == Tag("@TODO", "title", "first\nsecond", "a.c", 4)

    def test_tag_is_immutable(self):
        tag = Tag("@TODO", "x", "", "a.c", 1)
        with pytest.raises(AttributeError):
            tag.title = "y"

    def test_to_dict(self):
        assert Tag("@TODO", "x", "d", "src/a.c", 7).to_dict() == {
            "annotation": "@TODO",
            "title": "x",
            "description": "d",
            "source_file": "src/a.c",
            "line_number": 7,
        }
