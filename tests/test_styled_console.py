import pytest

from rescuekit.color import Color
from rescuekit.styled_console import DEFAULT_FONT_SIZE, Style, StyledConsole, TextStyle


def test_default_style():
    console = StyledConsole()
    assert console.style == Style(Color.BLACK, TextStyle.NORMAL, DEFAULT_FONT_SIZE)
    assert DEFAULT_FONT_SIZE == 11


def test_consecutive_writes_merge():
    console = StyledConsole()
    console.write("ab")
    console.write("cd")
    assert console.chunks == [(Style(), "abcd")]


def test_style_change_splits_runs():
    console = StyledConsole()
    console.write("plain")
    console.set_style(Color.RED, TextStyle.BOLD, 14)
    console.write("loud")
    assert console.chunks == [
        (Style(), "plain"),
        (Style(Color.RED, TextStyle.BOLD, 14), "loud"),
    ]


def test_print_to_console():
    console = StyledConsole()
    print("hello", file=console)
    assert console.chunks == [(Style(), "hello\n")]


def test_write_rejects_bytes():
    with pytest.raises(TypeError):
        StyledConsole().write(b"x")  # type: ignore[arg-type]


def test_render_default_span():
    console = StyledConsole()
    console.write("hi")
    expected = f'<span style="color:{Color.BLACK.to_html()};font-size:11pt;">hi</span>'
    assert expected in console.render_html()


def test_render_bold_italic():
    console = StyledConsole()
    console.set_style(Color.BLUE, TextStyle.BOLD_ITALIC, 9)
    console.write("x")
    out = console.render_html()
    assert (
        f'<span style="color:{Color.BLUE.to_html()};font-weight:bold;'
        'font-style:italic;font-size:9pt;">x</span>'
    ) in out


def test_render_escapes_text():
    console = StyledConsole()
    console.write("<b>&")
    out = console.render_html()
    assert "&lt;b&gt;&amp;" in out
    assert "<b>&" not in out


def test_render_wraps_in_pre():
    out = StyledConsole().render_html()
    assert out.index("<pre>") < out.index("</pre>")
    assert "<span" not in out


def test_clear_discards_text():
    console = StyledConsole()
    console.write("gone")
    console.clear()
    assert console.chunks == []


def test_styled_restores_style():
    console = StyledConsole()
    console.set_style(Color.GREEN, TextStyle.ITALIC, 12)
    with console.styled(color=Color.RED) as inner:
        inner.write("red")
        assert console.style == Style(Color.RED, TextStyle.ITALIC, 12)
    assert console.style == Style(Color.GREEN, TextStyle.ITALIC, 12)
    assert console.chunks == [(Style(Color.RED, TextStyle.ITALIC, 12), "red")]


def test_styled_restores_after_exception():
    console = StyledConsole()
    with pytest.raises(RuntimeError):
        with console.styled(style=TextStyle.BOLD, size=20):
            raise RuntimeError("boom")
    assert console.style == Style()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        StyledConsole().set_style(Color.BLACK, TextStyle.NORMAL, -1)