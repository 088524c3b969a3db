import pytest

pytest.importorskip("seaborn")

from camber import api
from camber.core.ease import smooth_start_3
from camber.exceptions import ConfigurationError, EasingNotFoundError, VisualizationError
from camber.visualization import (
    CurveVisualizer, PlotConfig, plot_all_families, plot_easing_family, plot_poly_demo
)


@pytest.fixture
def config(tmp_path):
    return PlotConfig(numel=20, file_format="svg", output_dir=str(tmp_path / "img"))


@pytest.mark.parametrize("kwargs", [
    {"numel": 1},
    {"dpi": 0},
    {"file_format": "gif"},
])
def test_invalid_plot_config(kwargs):
    with pytest.raises(ConfigurationError):
        PlotConfig(**kwargs).validate()


def test_plot_function_samples_configured_count(config):
    import matplotlib.pyplot as plt

    visualizer = CurveVisualizer(config)
    fig = visualizer.plot_function(smooth_start_3, "smooth_start_3")
    line = fig.axes[0].lines[0]
    assert len(line.get_xdata()) == 20
    assert line.get_ydata()[-1] == 1.
    assert fig.axes[0].get_title() == "smooth_start_3"
    plt.close(fig)


def test_plot_function_wraps_errors(config):
    def broken(t):
        raise RuntimeError("no")

    with pytest.raises(VisualizationError):
        CurveVisualizer(config).plot_function(broken, "broken")


def test_plot_easing_family(config, tmp_path):
    paths = plot_easing_family("smooth_stop", config)
    assert [p.name for p in paths] == [f"smooth_stop_{n}.svg" for n in range(2, 10)]
    assert all(p.exists() and p.stat().st_size > 0 for p in paths)


def test_plot_easing_family_unknown(config):
    with pytest.raises(EasingNotFoundError):
        plot_easing_family("smooth_bounce", config)


def test_plot_all_families(config):
    assert len(plot_all_families(config)) == 24


def test_plot_poly_demo(config):
    first, second = plot_poly_demo(config)
    assert first.name == "polyeval_1.svg"
    assert second.name == "polyeval_2.svg"
    assert first.exists() and second.exists()


def test_api_plot_easing_functions(tmp_path):
    paths = api.plot_easing_functions(["smooth_start"], output_dir=tmp_path, file_format="png", numel=10)
    assert len(paths) == 8
    assert all(p.suffix == ".png" for p in paths)


def test_api_plot_rejects_unknown_family(tmp_path):
    with pytest.raises(EasingNotFoundError):
        api.plot_easing_functions(["bounce"], output_dir=tmp_path)
