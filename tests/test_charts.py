import matplotlib

matplotlib.use("Agg")

from ui.charts import build_figures, save_figures  # noqa: E402
from ui.data import DISTRICTS, SEASONS, crops_for, strings  # noqa: E402


def test_reference_data():
    assert len(DISTRICTS) == 30
    assert "Cuttack" in DISTRICTS
    assert "Kharif" in SEASONS
    assert "Rice" in crops_for("Kharif")
    assert crops_for("Monsoon") == []


def test_strings_fall_back_to_english():
    assert strings("hi")["district"] == "जिला"
    assert strings("or")["district"] == "District"


def test_build_figures_titles():
    figures = build_figures("en")
    assert list(figures) == ["predictedYield", "soilPH", "rainfallPatterns"]
    assert figures["soilPH"].axes[0].get_title() == "Soil pH Levels"


def test_save_figures(tmp_path):
    paths = save_figures(tmp_path)
    assert sorted(p.name for p in paths) == ["predictedYield.png", "rainfallPatterns.png", "soilPH.png"]
    assert all(p.stat().st_size > 0 for p in paths)
