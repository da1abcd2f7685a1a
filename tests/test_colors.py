import pytest

from minipix.colors import get_good_color, lookup_color

RGB565 = (11, 5, 5, 6, 0, 5)
RGB888 = (16, 8, 8, 8, 0, 8)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xfffafa),
        ("white", 0xffffff),
        ("black", 0x0),
        ("red", 0xff0000),
        ("navy", 0x80),
        ("gray50", 0x7f7f7f),
        ("lightgreen", 0x90ee90),
        ("thistle4", 0x8b7b8b),
    ],
)
def test_named_colors(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


def test_unknown_name_gives_zero():
    assert lookup_color("not-a-colour") == 0


def test_lookup_is_case_insensitive():
    assert lookup_color("Red") == lookup_color("red")
    assert lookup_color("GhostWhite") == 0xf8f8ff


def test_first_duplicate_wins():
    assert lookup_color("light goldenrod") == 0xfafad2
    assert lookup_color("dark slate") == 0x2f4f4f


def test_suffix_joined_with_space():
    assert lookup_color("light", "grey") == 0xd3d3d3
    assert lookup_color("light", "grey") == lookup_color("light grey")


def test_suffix_ignored_for_hex():
    assert lookup_color("#ff00ff", "grey") == 0xff00ff


def test_hex_spec():
    assert lookup_color("#ff99ff") == 0xff99ff
    assert lookup_color("#00FFFF") == 0x00ffff


def test_hex_with_prefix_and_garbage():
    assert lookup_color("#0x00ffff") == 0x00ffff
    assert lookup_color("#zz") == 0
    assert lookup_color("#ff00zz") == 0xff00


def test_long_name_truncated_before_lookup():
    assert lookup_color("white" + " " * 70, "x") == 0


def test_deep_visual_passes_color_through():
    for color in (0, 0xff99ff, 0x00ffff, -1):
        assert get_good_color(color, 24, RGB565) == color
        assert get_good_color(color, 32, ()) == color


def test_full_width_channels_are_identity():
    for color in (0, 0xff99ff, 0x00ffff, 0x123456, 0xffffff):
        assert get_good_color(color, 16, RGB888) == color


def test_black_maps_to_zero():
    assert get_good_color(0, 16, RGB565) == 0


def test_channels_stay_inside_their_masks():
    red_mask = 0x1F << 11
    green_mask = 0x3F << 5
    blue_mask = 0x1F
    assert get_good_color(0xff0000, 16, RGB565) & ~red_mask == 0
    assert get_good_color(0x00ff00, 16, RGB565) & ~green_mask == 0
    assert get_good_color(0x0000ff, 16, RGB565) & ~blue_mask == 0
    white = get_good_color(0xffffff, 16, RGB565)
    assert white == red_mask | green_mask | blue_mask


def test_result_combines_channels():
    red = get_good_color(0xff0000, 16, RGB565)
    green = get_good_color(0x00ff00, 16, RGB565)
    blue = get_good_color(0x0000ff, 16, RGB565)
    assert get_good_color(0xffffff, 16, RGB565) == red + green + blue


def test_shifts_must_have_six_values():
    with pytest.raises(ValueError):
        get_good_color(0xffffff, 16, (11, 5, 5, 6))


def test_channel_width_out_of_range():
    with pytest.raises(ValueError):
        get_good_color(0xffffff, 16, (0, 17, 0, 8, 0, 8))