from by_group import nest
from plotting import plot_group, plot_nested, safe_name


def test_safe_name():
    assert safe_name("Korea, Rep.") == "Korea_Rep."
    assert safe_name(1952) == "1952"
    assert safe_name("///") == "group"


def test_plot_group_writes_png(sample_df, tmp_path):
    out = plot_group(sample_df, "all", tmp_path / "figs" / "all.png")

    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_plot_nested_one_file_per_group(sample_df, tmp_path):
    nested = nest(sample_df, "continent")

    saved = plot_nested(nested, "continent", tmp_path, dpi=50)

    assert sorted(p.name for p in saved) == ["Africa.png", "Asia.png", "Europe.png"]
    assert all(p.exists() for p in saved)


def test_plot_nested_by_year(sample_df, tmp_path):
    saved = plot_nested(nest(sample_df, "year"), "year", tmp_path, dpi=50)

    assert sorted(p.name for p in saved) == ["1952.png", "1957.png", "1962.png"]
