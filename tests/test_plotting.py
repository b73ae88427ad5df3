import matplotlib.pyplot as plt
import numpy as np
import pytest

from jax_isopotential import (
    ConfigurationError,
    GridSpec,
    Star,
    body_outline,
    body_position,
    plot_isopotential,
    save_figure,
    show_figure,
)


@pytest.fixture
def figure(params, small_grid):
    fig = plot_isopotential(params, small_grid, levels=20)
    yield fig
    plt.close(fig)


@pytest.mark.parametrize("star,radius", [(Star.PRIMARY, 0.5), (Star.SECONDARY, 0.1)])
def test_body_outline_on_surface(params, star, radius):
    x, y = body_outline(params, star, n=100)
    assert x.shape == (100,) and y.shape == (100,)
    centre = body_position(params, star)
    r = np.hypot(np.asarray(x) - float(centre.x), np.asarray(y) - float(centre.y))
    np.testing.assert_allclose(r, radius)


def test_body_outline_does_not_repeat_start(params):
    x, y = body_outline(params, Star.PRIMARY, n=8)
    pts = set(zip(np.round(np.asarray(x), 12), np.round(np.asarray(y), 12)))
    assert len(pts) == 8


def test_figure_labels(figure):
    ax = figure.axes[0]
    assert ax.get_title() == "Effective Potential: Two-Body System (Mass Ratio 10:1)"
    assert ax.get_xlabel() == "x (distance units)"
    assert ax.get_ylabel() == "y (distance units)"
    assert ax.get_aspect() == 1.0


def test_figure_colorbar(figure):
    assert len(figure.axes) == 2
    assert figure.axes[1].get_ylabel() == "Effective Potential"


def test_figure_legend_names_bodies(figure):
    texts = [t.get_text() for t in figure.axes[0].get_legend().get_texts()]
    assert texts == ["Primary (M=10, R=0.5)", "Secondary (M=1, R=0.1)"]


def test_outlines_drawn_in_body_colours(figure):
    lines = figure.axes[0].get_lines()
    colours = [line.get_color() for line in lines]
    assert colours.count("red") == 2
    assert colours.count("orange") == 2


def test_save_figure(tmp_path, figure):
    out = tmp_path / "field.png"
    out.write_bytes(b"stale")
    assert save_figure(figure, out) == out
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_save_figure_missing_directory(tmp_path, figure):
    with pytest.raises(OSError):
        save_figure(figure, tmp_path / "missing" / "field.png")
    assert not (tmp_path / "missing").exists()


def test_show_figure_headless_is_not_an_error(figure):
    assert show_figure(figure) is False


def test_invalid_grid_raises(params):
    with pytest.raises(ConfigurationError):
        plot_isopotential(params, GridSpec(nx=-1))


def test_show_figure_on_interactive_backend(monkeypatch, figure):
    import matplotlib

    calls = []
    monkeypatch.setattr(matplotlib, "get_backend", lambda: "TkAgg")
    monkeypatch.setattr(plt, "show", lambda *args, **kwargs: calls.append(args))
    assert show_figure(figure) is True
    assert len(calls) == 1
