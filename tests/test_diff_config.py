import math

import pytest

from matchpack.diff import (
    DiffConfig,
    DiffConfigError,
    FloatCompareMode,
    normalize_compare_mode,
    normalize_numeric_mode,
)


def test_config_defaults() -> None:
    config = DiffConfig(compare_mode="strict")

    assert config.array_sorting_mode == "consider"
    assert config.numeric_mode == "strict"
    assert config.float_compare_mode == FloatCompareMode.exact()
    assert config.to_dict() == {
        "compare_mode": "strict",
        "array_sorting_mode": "consider",
        "numeric_mode": "strict",
        "float_compare_mode": {"kind": "exact"},
    }


def test_builder_methods_return_updated_copies() -> None:
    base = DiffConfig.inclusive()

    updated = (
        base.with_numeric_mode("assume_float")
        .with_float_compare_mode(FloatCompareMode.epsilon(0.5))
        .consider_array_sorting(False)
    )

    assert base.numeric_mode == "strict"
    assert base.array_sorting_mode == "consider"
    assert updated.numeric_mode == "assume_float"
    assert updated.array_sorting_mode == "ignore"
    assert updated.float_compare_mode.threshold == 0.5
    assert updated.to_dict()["float_compare_mode"] == {"kind": "epsilon", "threshold": 0.5}


def test_config_is_immutable() -> None:
    config = DiffConfig.strict()

    with pytest.raises(AttributeError):
        config.compare_mode = "inclusive"  # type: ignore[misc]


def test_strict_with_ignored_array_order_is_rejected_at_build_time() -> None:
    with pytest.raises(DiffConfigError, match="strict comparison"):
        DiffConfig.strict().consider_array_sorting(False)

    with pytest.raises(DiffConfigError):
        DiffConfig(compare_mode="strict", array_sorting_mode="ignore")


def test_switching_to_strict_after_ignoring_order_is_rejected() -> None:
    unordered = DiffConfig.inclusive().consider_array_sorting(False)

    with pytest.raises(DiffConfigError):
        unordered.with_compare_mode("strict")

    assert unordered.consider_array_sorting(True).with_compare_mode("strict").compare_mode == "strict"


def test_mode_strings_are_normalized() -> None:
    config = DiffConfig(compare_mode=" Inclusive ", numeric_mode="assume-float")  # type: ignore[arg-type]

    assert config.compare_mode == "inclusive"
    assert config.numeric_mode == "assume_float"
    assert normalize_compare_mode("STRICT") == "strict"
    assert normalize_numeric_mode("Assume_Float") == "assume_float"


def test_unknown_modes_are_rejected() -> None:
    with pytest.raises(DiffConfigError, match="compare mode"):
        DiffConfig(compare_mode="fuzzy")  # type: ignore[arg-type]

    with pytest.raises(DiffConfigError, match="array sorting mode"):
        DiffConfig(compare_mode="inclusive", array_sorting_mode="shuffle")  # type: ignore[arg-type]

    with pytest.raises(DiffConfigError):
        DiffConfig.strict().with_float_compare_mode("exact")  # type: ignore[arg-type]


@pytest.mark.parametrize("threshold", [-0.1, math.nan, math.inf])
def test_invalid_epsilon_is_rejected(threshold: float) -> None:
    with pytest.raises(DiffConfigError):
        FloatCompareMode.epsilon(threshold)


def test_config_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        DiffConfig(compare_mode="strict", array_sorting_mode="ignore")


def test_float_compare_mode_equality_rules() -> None:
    assert FloatCompareMode.exact().floats_equal(0.1, 0.1) is True
    assert FloatCompareMode.exact().floats_equal(0.1, 0.1000001) is False
    assert FloatCompareMode.epsilon(0.001).floats_equal(0.1, 0.1005) is True
    assert FloatCompareMode.epsilon(0.0).floats_equal(2.0, 2.0) is True
    assert FloatCompareMode.epsilon(1000.0).floats_equal(math.inf, math.inf) is True
    assert FloatCompareMode.epsilon(1000.0).floats_equal(math.inf, -math.inf) is False
