import numpy as np
import pytest

from flowgrid.surface import plot_surface, surface_labels


def test_labels_for_small_field():
    s = np.array([[1.0, 2.0], [3.0, -4.0]])
    mmlabel, tlabel = surface_labels(s, 1.5)
    assert mmlabel == "MIN=-4.000  MAX=3.000"
    assert tlabel == "TIME = 1.5000"


def test_nyuse_limits_search():
    s = np.array([[1.0, 2.0, 100.0], [3.0, -4.0, -100.0]])
    full, _ = surface_labels(s, 0.0)
    limited, _ = surface_labels(s, 0.0, nyuse=2)
    assert limited == surface_labels(s[:, :2], 0.0)[0]
    assert full != limited
    assert "MAX=100.000" in full


@pytest.mark.parametrize("nyuse", [0, 4, -1])
def test_bad_nyuse_raises(nyuse):
    with pytest.raises(ValueError):
        surface_labels(np.zeros((3, 3)), 0.0, nyuse=nyuse)


def test_flat_field_raises():
    with pytest.raises(ValueError):
        surface_labels(np.zeros(5), 0.0)


def test_plot_surface_writes_png_with_labels(tmp_path):
    s = np.outer(np.arange(6.0), np.arange(5.0))
    target = tmp_path / "surface.png"
    fig = plot_surface(s, 2.0, -75.0, 20.0, "Surface plot", "Analyst", path=target)
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    texts = {t.get_text() for t in fig.texts}
    expected_mm, expected_t = surface_labels(s, 2.0)
    assert {"Surface plot", "Analyst", expected_mm, expected_t} <= texts


def test_plot_surface_sets_view():
    s = np.ones((4, 4))
    fig = plot_surface(s, 0.0, -30.0, 20.0, "View", "Analyst", nyuse=3)
    ax = fig.axes[0]
    assert ax.azim == pytest.approx(-30.0)
    assert ax.elev == pytest.approx(20.0)