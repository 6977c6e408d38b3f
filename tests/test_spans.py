from rich.style import Style

from numinput.spans import SpanBuilder


def test_plain_concatenates_fragments() -> None:
    builder = SpanBuilder()
    builder.push("+ ", "accent")
    builder.push("12")
    assert builder.plain == "+ 12"
    assert list(builder) == [("+ ", "accent"), ("12", "plain")]


def test_to_text_resolves_tags_through_theme() -> None:
    builder = SpanBuilder()
    builder.push("> ", "accent")
    builder.push("7")
    builder.push(" (max value)", "muted")

    text = builder.to_text({"accent": "bold blue", "muted": "dim"})
    assert text.plain == "> 7 (max value)"
    styles = [str(span.style) for span in text.spans]
    assert styles == ["bold blue", "dim"]


def test_to_text_default_theme_and_unknown_tags() -> None:
    builder = SpanBuilder()
    builder.push("x", "accent")
    builder.push("y", "no-such-tag")
    text = builder.to_text()
    assert text.plain == "xy"
    assert Style.parse(str(text.spans[0].style)).color.name == "green"
    assert len(text.spans) == 1


def test_extend_appends_other_builder() -> None:
    first = SpanBuilder()
    first.push("a")
    second = SpanBuilder()
    second.push("b", "error")
    first.extend(second)
    assert len(first) == 2
    assert first.plain == "ab"
