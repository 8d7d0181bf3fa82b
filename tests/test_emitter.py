"""Tests for the declaration file writer."""

import pytest

from yuidts.emitter import DeclarationSink, Emitter


def test_indentation():
    emit = Emitter()
    emit("declare class p5 {")
    emit.indent()
    assert emit.indent_level == 1
    emit("frameCount: number;")
    emit.dedent()
    emit("}")
    assert emit.getvalue() == "declare class p5 {\n    frameCount: number;\n}\n"


def test_section_break_never_doubles():
    emit = Emitter()
    emit.section_break()
    emit("a")
    emit.section_break()
    emit.section_break()
    emit("b")
    assert emit.getvalue() == "a\n\nb\n"


def test_description():
    emit = Emitter()
    emit.indent()
    emit.description("<p>Draws a <b>rectangle</b>.</p>\n\nSecond line.")
    emit.description("")
    assert emit.getvalue() == "    /**\n     * Draws a rectangle.\n     *\n     * Second line.\n     */\n"


def test_dedent_below_zero():
    with pytest.raises(ValueError):
        Emitter().dedent()


def test_source_file_tracking():
    emit = Emitter()
    emit.set_current_source_file("src/core/main.js")
    assert emit.current_source_file == "src/core/main.js"
    assert isinstance(emit, DeclarationSink)


def test_close_writes_file(tmp_path):
    emit = Emitter(tmp_path / "types" / "p5.d.ts")
    emit("declare var width: number;")
    emit.close()
    assert (tmp_path / "types" / "p5.d.ts").read_text(encoding="utf-8") == "declare var width: number;\n"
