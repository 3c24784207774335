from bencoding import decode
from errors import DecodeError
from ui import render, ui, MAX_PREVIEW
from values import ByteString


def test_render_labels_follow_the_tree():
    tree = render(decode("d4:name5:alice4:tagsli1e2:xyee"), title="meta")
    assert tree.label.plain == "meta"

    (root,) = tree.children
    assert root.label.plain == "Dict [2]"

    name, tags = root.children
    assert name.label.plain == "name: 'alice' (5)"
    assert tags.label.plain == "tags: List [2]"
    assert [child.label.plain for child in tags.children] == ["1", "'xy' (2)"]


def test_render_shortens_long_strings():
    tree = render(ByteString("a" * (MAX_PREVIEW + 10)))
    label = tree.children[0].label.plain
    assert label.endswith(f"…' ({MAX_PREVIEW + 10})")


def test_show_prints_the_value():
    with ui.console.capture() as capture:
        ui.show(decode("l5:helloe"))
    assert "hello" in capture.get()


def test_print_error_points_at_offset():
    source = "l1:ai1xe"
    try:
        decode(source)
    except DecodeError as e:
        error = e

    with ui.console.capture() as capture:
        ui.print_error(error, source)
    output = capture.get()
    assert "IntegerParseError" in output
    assert "    ^" in output
