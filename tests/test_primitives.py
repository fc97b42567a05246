import random

from PIL import Image

from rowgram.services.template_generator.primitives import (
    Path,
    ellipse_points,
    linear_gradient,
    place_club_icon,
    radial_gradient,
    rounded_rect,
    rowing_boat,
    speckle,
)
from rowgram.services.template_generator.surface import Surface


def _close(pixel, expected, tolerance=6) -> bool:
    return all(abs(a - b) <= tolerance for a, b in zip(pixel, expected))


def test_quad_curve_ends_on_target() -> None:
    path = Path(0, 0).quad_to(50, 100, 100, 0, steps=8)
    assert len(path.points) == 9
    assert path.points[-1] == (100, 0)
    # Midpoint of a symmetric quadratic sits halfway to the control point
    assert path.points[4] == (50, 50)


def test_ellipse_points_rotate() -> None:
    flat = ellipse_points(0, 0, 10, 2, steps=4)
    turned = ellipse_points(0, 0, 10, 2, rotation=1.5707963267948966, steps=4)
    assert round(flat[0][0]) == 10
    assert round(turned[0][1]) == 10


def test_linear_gradient_hits_both_ends() -> None:
    surface = Surface(200, 400)
    linear_gradient(surface, (0, 0), (0, 400), [(0, "#ff0000"), (1, "#0000ff")])
    assert _close(surface.image.getpixel((100, 0)), (255, 0, 0))
    assert _close(surface.image.getpixel((100, 399)), (0, 0, 255))
    r, _, b = surface.image.getpixel((100, 200))
    assert 100 < r < 155 and 100 < b < 155


def test_multi_stop_gradient_passes_through_middle_stop() -> None:
    surface = Surface(100, 400)
    linear_gradient(surface, (0, 0), (0, 400), [(0, "#000000"), (0.5, "#ffffff"), (1, "#000000")])
    assert _close(surface.image.getpixel((50, 200)), (255, 255, 255), tolerance=10)


def test_radial_gradient_centre_and_rim() -> None:
    surface = Surface(200, 200)
    radial_gradient(surface, (100, 100), 100, [(0, "#ffffff"), (1, "#000000")])
    assert _close(surface.image.getpixel((100, 100)), (255, 255, 255), tolerance=10)
    assert _close(surface.image.getpixel((0, 0)), (0, 0, 0))


def test_rounded_rect_fills_interior() -> None:
    surface = Surface(100, 100, background="#000000")
    rounded_rect(surface, 10, 10, 80, 40, 10, fill="#00ff00")
    assert surface.image.getpixel((50, 30)) == (0, 255, 0)
    assert surface.image.getpixel((10, 10)) == (0, 0, 0)


def test_rowing_boat_returns_seats_bow_first() -> None:
    surface = Surface(400, 800)
    seats = rowing_boat(surface, 200, 50, 600, 8, "#ffffff", "#000000", coxed=True)
    assert len(seats) == 8
    ys = [y for _, y in seats]
    assert ys == sorted(ys)
    assert all(x == 200 for x, _ in seats)


def test_horizontal_boat_runs_left_to_right() -> None:
    surface = Surface(800, 200)
    seats = rowing_boat(surface, 50, 100, 700, 4, "#ffffff", "#000000", horizontal=True, beam=16)
    xs = [x for x, _ in seats]
    assert xs == sorted(xs)
    assert all(y == 100 for _, y in seats)


def test_speckle_is_reproducible() -> None:
    first, second = Surface(100, 100), Surface(100, 100)
    speckle(first, random.Random(3), 200, (0, 0, 0), max_opacity=0.5)
    speckle(second, random.Random(3), 200, (0, 0, 0), max_opacity=0.5)
    assert first.image.tobytes() == second.image.tobytes()


def test_place_club_icon_corners() -> None:
    icon = Image.new("RGBA", (20, 20), (255, 0, 0, 255))

    surface = Surface(200, 200, background="#000000")
    surface.club_icon = icon
    place_club_icon(surface, "top-right", margin=10)
    assert surface.image.getpixel((180, 20)) == (255, 0, 0)

    surface = Surface(200, 200, background="#000000")
    surface.club_icon = icon
    place_club_icon(surface, "bottom-left", margin=10)
    assert surface.image.getpixel((20, 180)) == (255, 0, 0)


def test_place_club_icon_none_is_noop() -> None:
    surface = Surface(200, 200, background="#000000")
    surface.club_icon = Image.new("RGBA", (20, 20), (255, 0, 0, 255))
    place_club_icon(surface, "none")
    assert surface.image.getcolors() == [(200 * 200, (0, 0, 0))]


def test_place_club_icon_scales_large_icons_down() -> None:
    surface = Surface(400, 400, background="#000000")
    surface.club_icon = Image.new("RGBA", (1000, 500), (0, 0, 255, 255))
    place_club_icon(surface, "bottom-right", max_size=100, margin=0)
    assert surface.image.getpixel((399, 399)) == (0, 0, 255)
    assert surface.image.getpixel((250, 399)) == (0, 0, 0)
