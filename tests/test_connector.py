from __future__ import annotations

from line_to_definition.config import StyleConfig
from line_to_definition.connector import (
    Orientation,
    background_image,
    build_line_descriptor,
    compute_drawing_box,
    decoration_css,
    render_svg,
    select_orientation,
)
from line_to_definition.geometry import Position, Range


def test_select_orientation_vertical_on_equal_columns() -> None:
    assert select_orientation(Position(10, 3), Position(3, 3)) is Orientation.VERTICAL


def test_select_orientation_descending_when_definition_left() -> None:
    assert select_orientation(Position(1, 2), Position(8, 9)) is Orientation.DESCENDING
    # Line order does not matter, only columns.
    assert select_orientation(Position(9, 2), Position(1, 9)) is Orientation.DESCENDING


def test_select_orientation_ascending_when_definition_right() -> None:
    assert select_orientation(Position(1, 12), Position(8, 4)) is Orientation.ASCENDING


def test_drawing_box_trims_ascending_width_only() -> None:
    rect = Range.of(0, 2, 5, 8)

    descending = compute_drawing_box(rect, Orientation.DESCENDING)
    ascending = compute_drawing_box(rect, Orientation.ASCENDING)

    assert descending.width_chars == 6
    assert ascending.width_chars == 5
    assert descending.left_offset_chars == ascending.left_offset_chars == 2


def test_drawing_box_enforces_minimum_width() -> None:
    box = compute_drawing_box(Range.of(3, 3, 10, 3), Orientation.VERTICAL)
    narrow = compute_drawing_box(Range.of(0, 4, 2, 5), Orientation.ASCENDING)

    assert box.width_chars == 2
    assert narrow.width_chars == 2


def test_drawing_box_vertical_inset_and_height() -> None:
    box = compute_drawing_box(Range.of(3, 3, 10, 3), Orientation.VERTICAL)

    assert box.height_lines == 7
    assert box.top_offset_lines == 1
    assert box.top_px(20) == 20
    assert box.height_px(20) == 120


def test_drawing_box_height_never_negative() -> None:
    box = compute_drawing_box(Range.of(4, 1, 4, 9), Orientation.DESCENDING)

    assert box.height_lines == 0
    assert box.height_px(18) == 0


def test_line_descriptor_endpoints_per_orientation() -> None:
    style = StyleConfig()

    vertical = build_line_descriptor(Orientation.VERTICAL, style)
    descending = build_line_descriptor(Orientation.DESCENDING, style)
    ascending = build_line_descriptor(Orientation.ASCENDING, style)

    assert (vertical.start, vertical.end) == ((50, 0), (50, 100))
    assert (descending.start, descending.end) == ((0, 0), (100, 100))
    assert (ascending.start, ascending.end) == ((100, 0), (0, 100))


def test_line_descriptor_carries_style() -> None:
    style = StyleConfig(line_color="#00ff00", line_width=2.5, line_opacity=80)

    descriptor = build_line_descriptor(Orientation.DESCENDING, style)

    assert descriptor.color == "#00ff00"
    assert descriptor.width == 2.5
    assert descriptor.opacity_percent == 80


def test_render_svg_contains_single_styled_line() -> None:
    descriptor = build_line_descriptor(Orientation.VERTICAL, StyleConfig())

    svg = render_svg(descriptor)

    assert svg.startswith('<svg width="100%" height="100%"')
    assert svg.count("<line") == 1
    assert 'x1="50%" y1="0%" x2="50%" y2="100%"' in svg
    assert 'stroke="red"' in svg
    assert 'stroke-width="1"' in svg
    assert 'stroke-opacity="50%"' in svg
    assert "\n" not in svg


def test_render_svg_escapes_color_attribute() -> None:
    style = StyleConfig(line_color='red" onload="x')
    descriptor = build_line_descriptor(Orientation.VERTICAL, style)

    svg = render_svg(descriptor)

    assert 'stroke="red&quot; onload=&quot;x"' in svg
    assert 'onload="' not in svg


def test_background_image_wraps_svg_data_url() -> None:
    descriptor = build_line_descriptor(Orientation.ASCENDING, StyleConfig())

    image = background_image(descriptor)

    assert image.startswith("url('data:image/svg+xml,<svg")
    assert image.endswith("</svg>')")


def test_decoration_css_uses_line_height_and_inset() -> None:
    box = compute_drawing_box(Range.of(3, 3, 10, 3), Orientation.VERTICAL)
    descriptor = build_line_descriptor(Orientation.VERTICAL, StyleConfig())

    css = decoration_css(box, descriptor, 20)

    assert css.startswith("position:absolute;")
    assert "width:2ch;" in css
    assert "height:120px;" in css
    assert "top:20px;" in css
    assert "pointer-events:none;" in css
    assert "background-image:url('data:image/svg+xml," in css
