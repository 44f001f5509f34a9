from goveebridge.scenes import sort_and_dedup_scenes


def test_sorts_case_insensitively_and_removes_duplicates():
    scenes = ["Sunset", "aurora", "Sunset", "Forest"]
    assert sort_and_dedup_scenes(scenes) == ["aurora", "Forest", "Sunset"]


def test_empty():
    assert sort_and_dedup_scenes([]) == []


def test_different_case_is_not_a_duplicate():
    result = sort_and_dedup_scenes(["b", "A", "a"])
    assert result == ["A", "a", "b"]


def test_only_adjacent_exact_duplicates_are_dropped():
    # Stable sort keeps "A" and "a" in input order; none are adjacent equals.
    result = sort_and_dedup_scenes(["A", "a", "A"])
    assert result == ["A", "a", "A"]


def test_idempotent_and_no_adjacent_duplicates():
    scenes = ["Rainbow", "rainbow", "Ocean", "ocean", "Ocean", "Candle", "candle"]
    once = sort_and_dedup_scenes(scenes)
    assert sort_and_dedup_scenes(once) == once
    assert all(a != b for a, b in zip(once, once[1:]))
    keys = [s.lower() for s in once]
    assert keys == sorted(keys)
    assert set(once) == set(scenes)


def test_accepts_any_iterable_and_leaves_input_alone():
    scenes = ["b", "a", "b"]
    result = sort_and_dedup_scenes(iter(scenes))
    assert result == ["a", "b"]
    assert scenes == ["b", "a", "b"]