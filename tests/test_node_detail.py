from hierarchyinspector.models import ElementNode, Rect
from hierarchyinspector.node_detail import DetailLine, NodeDetailState, format_frame


def test_format_frame_uses_one_decimal() -> None:
    assert format_frame(Rect(10, 20.26, 100, 50.04)) == "{{10.0, 20.3}, {100.0, 50.0}}"


def test_detail_lines_include_optional_attributes() -> None:
    node = ElementNode(type="Button", identifier="go", label="Go", frame=Rect(1, 2, 3, 4))

    lines = NodeDetailState(node=node, is_selected=True).detail_lines

    assert lines == [
        DetailLine("Element", "Button"),
        DetailLine("Identifier", "'go'"),
        DetailLine("Label", "'Go'"),
        DetailLine("Frame", "{{1.0, 2.0}, {3.0, 4.0}}"),
        DetailLine("Selected", "true"),
    ]


def test_detail_lines_skip_missing_attributes() -> None:
    lines = NodeDetailState(node=ElementNode(type="Other")).detail_lines

    assert [line.title for line in lines] == ["Element", "Frame", "Selected"]
    assert lines[-1].value == "false"


def test_empty_state_has_no_lines_or_suggestions() -> None:
    state = NodeDetailState()

    assert not state.has_node
    assert state.detail_lines == []
    assert state.suggestions == []


def test_suggestions_follow_selected_node() -> None:
    state = NodeDetailState(node=ElementNode(type="Switch", identifier="wifi"))

    assert [item.code for item in state.suggestions] == ['let element = app.switches["wifi"]']
