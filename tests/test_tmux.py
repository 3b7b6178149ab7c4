import pytest

from copyrat.errors import (
    CopyratError,
    ExpectedBool,
    ExpectedEnumVariant,
    ExpectedInt,
    ExpectedPaneIdMarker,
)
from copyrat.tmux import (
    CaptureRegion,
    Pane,
    PaneId,
    parse_bool,
    parse_options,
    parse_panes,
)


def test_parse_pass():
    output = ["%52:false:62:3:false", "%53:false:23::true"]
    panes = [Pane.parse(line) for line in output]
    expected = [
        Pane(
            id=PaneId.parse("%52"),
            is_copy_mode=False,
            height=62,
            scroll_position=3,
            is_active=False,
        ),
        Pane(
            id=PaneId("%53"),
            is_copy_mode=False,
            height=23,
            scroll_position=0,
            is_active=True,
        ),
    ]
    assert panes == expected


def test_parse_panes_ignores_trailing_newline():
    panes = parse_panes("%52:false:62:3:false\n%53:false:23::true\n")
    assert [str(p.id) for p in panes] == ["%52", "%53"]
    assert [p.is_active for p in panes] == [False, True]


def test_pane_id_roundtrip():
    assert str(PaneId.parse("%52")) == "%52"


def test_pane_id_requires_marker():
    with pytest.raises(ExpectedPaneIdMarker):
        PaneId.parse("52")


@pytest.mark.parametrize("src", ["%abc", "%", "%-1", "%70000"])
def test_pane_id_invalid_number(src):
    with pytest.raises(ExpectedInt):
        PaneId.parse(src)


def test_pane_bad_bool():
    with pytest.raises(ExpectedBool):
        Pane.parse("%1:yes:10:0:false")


def test_pane_bad_height():
    with pytest.raises(ExpectedInt):
        Pane.parse("%1:false:tall:0:false")


def test_pane_wrong_item_count():
    with pytest.raises(CopyratError):
        Pane.parse("%1:false:10:0")


def test_parse_bool():
    assert parse_bool("true") is True
    assert parse_bool("false") is False
    with pytest.raises(ExpectedBool):
        parse_bool("True")


def test_capture_region_parse():
    assert CaptureRegion.parse("Entire-History") is CaptureRegion.ENTIRE_HISTORY
    assert CaptureRegion.parse("visible-area") is CaptureRegion.VISIBLE_AREA
    with pytest.raises(ExpectedEnumVariant):
        CaptureRegion.parse("everything")


def test_capture_args_entire_history():
    pane = Pane.parse("%52:false:62:3:false")
    assert pane.capture_args(CaptureRegion.ENTIRE_HISTORY) == [
        "capture-pane", "-t", "%52", "-J", "-p", "-S", "-", "-E", "-",
    ]


def test_capture_args_visible_area_normal_mode():
    pane = Pane.parse("%52:false:62:3:false")
    assert pane.capture_args(CaptureRegion.VISIBLE_AREA) == [
        "capture-pane", "-t", "%52", "-J", "-p",
    ]


def test_capture_args_visible_area_scrolled_copy_mode():
    pane = Pane.parse("%52:true:62:3:true")
    args = pane.capture_args(CaptureRegion.VISIBLE_AREA)
    assert args[:5] == ["capture-pane", "-t", "%52", "-J", "-p"]
    assert args[5:] == ["-S", "-3", "-E", "58"]


def test_parse_options():
    output = (
        '@copyrat-alphabet "azerty"\n'
        "@copyrat-reverse false\n"
        "status on\n"
    )
    assert parse_options(output, "@copyrat-") == {
        "@copyrat-alphabet": "azerty",
        "@copyrat-reverse": "false",
    }