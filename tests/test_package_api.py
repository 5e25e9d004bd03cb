import stringmetric as pkg


def test_top_level_exports():
    assert "levenshtein" in pkg.__all__
    assert "damerau_levenshtein" in pkg.__all__
    assert pkg.DEFAULT_COST == 1.0
    assert issubclass(pkg.NegativeCostError, ValueError)


def test_engines_share_surface():
    for engine in (pkg.levenshtein, pkg.damerau_levenshtein):
        for name in ("distance", "similarity", "symmetric_distance", "symmetric_similarity"):
            assert callable(getattr(engine, name))


def test_short_aliases():
    assert pkg.levenshtein.lev is pkg.levenshtein.distance
    assert pkg.damerau_levenshtein.dam_lev is pkg.damerau_levenshtein.distance
    assert pkg.damerau_levenshtein.osa is pkg.damerau_levenshtein.distance
