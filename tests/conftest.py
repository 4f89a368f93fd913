import pandas as pd
import pytest


@pytest.fixture
def sample_df():
    """Three countries over three years, rows interleaved by year."""
    rows = [
        ("Chad", "Africa", 1952, 38.092, 2682462.0, 1178.665927),
        ("Norway", "Europe", 1952, 72.67, 3327728.0, 10095.42172),
        ("Korea, Rep.", "Asia", 1952, 47.453, 20947571.0, 1030.592226),
        ("Chad", "Africa", 1957, 39.881, 2894855.0, 1308.495577),
        ("Norway", "Europe", 1957, 73.44, 3491938.0, 11653.97304),
        ("Korea, Rep.", "Asia", 1957, 52.681, 22611552.0, 1487.593537),
        ("Chad", "Africa", 1962, 41.716, 3150417.0, 1389.817618),
        ("Norway", "Europe", 1962, 73.47, 3638919.0, 13450.40151),
        ("Korea, Rep.", "Asia", 1962, 55.292, 26420307.0, 1536.344387),
    ]
    return pd.DataFrame(
        rows, columns=["country", "continent", "year", "lifeExp", "pop", "gdpPercap"]
    )
