"""Unit tests for the advisory configuration checks."""

from furniture.application.config import (
    FurnitureRequestConfig,
    ValidationResult,
    validate_config,
)
from furniture.application.config.validator import (
    check_option_advisories,
    check_partition_advisories,
    check_stability_advisories,
)


def _config(**data) -> FurnitureRequestConfig:
    return FurnitureRequestConfig.model_validate(data)


class TestValidationResult:
    def test_exit_codes(self) -> None:
        result = ValidationResult()
        assert result.exit_code == 0
        result.add_warning("dimensions", "tall")
        assert result.exit_code == 2

    def test_merge(self) -> None:
        first = ValidationResult().add_warning("a", "one")
        second = ValidationResult().add_warning("b", "two").add_warning("c", "three")
        first.merge(second)
        assert [w.path for w in first.warnings] == ["a", "b", "c"]
        assert first.has_warnings


class TestStabilityAdvisories:
    def test_default_table_is_quiet(self) -> None:
        assert not check_stability_advisories(_config(furnitureType="table")).has_warnings

    def test_default_bookshelf_warns(self) -> None:
        result = check_stability_advisories(_config(furnitureType="bookshelf"))
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.path == "dimensions"
        assert "6.0:1" in warning.message
        assert "3:1" in warning.suggestion


class TestPartitionAdvisories:
    """Tests for divider crowding and ignored settings."""

    def test_settings_ignored_for_tables(self) -> None:
        result = check_partition_advisories(
            _config(furnitureType="table", partitionStrategy="all-shelves")
        )
        assert len(result.warnings) == 1
        assert result.warnings[0].path == "furnitureType"
        assert result.warnings[0].message == (
            "Shelf and partition settings are ignored for table"
        )

    def test_plain_bookshelf_is_quiet(self) -> None:
        result = check_partition_advisories(_config(furnitureType="bookshelf", shelfCount=4))
        assert not result.has_warnings

    def test_crowded_counts(self) -> None:
        result = check_partition_advisories(
            _config(
                furnitureType="bookshelf",
                dimensions={"length": 50, "width": 30, "height": 180},
                partitionCount=10,
                shelfModifiers=[{"target": "2", "count": 10}, {"target": "3", "count": 7}],
            )
        )
        assert [w.path for w in result.warnings] == ["partitionCount", "shelfModifiers[0]"]
        assert "exceed the 7 that fit in 50cm" in result.warnings[0].message

    def test_ratio_and_count_disagree(self) -> None:
        result = check_partition_advisories(
            _config(
                furnitureType="bookshelf",
                shelfModifiers=[{"target": "top", "count": 3, "ratio": "1:1"}],
            )
        )
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.path == "shelfModifiers[0]"
        assert "implies 1 divider(s) but count is 3" in warning.message

    def test_random_ratio_uses_count(self) -> None:
        result = check_partition_advisories(
            _config(furnitureType="bookshelf", partitionRatio="random", partitionCount=2)
        )
        assert not result.has_warnings


class TestValidateConfig:
    def test_armrests_ignored_outside_chairs(self) -> None:
        result = check_option_advisories(_config(furnitureType="desk", hasArmrests=True))
        assert result.warnings[0].path == "hasArmrests"

    def test_chair_with_armrests_is_clean(self) -> None:
        result = validate_config(_config(furnitureType="chair", hasArmrests=True))
        assert result.exit_code == 0

    def test_combines_all_checks(self) -> None:
        result = validate_config(
            _config(
                furnitureType="bookshelf",
                dimensions={"length": 50, "width": 30, "height": 180},
                partitionCount=10,
                hasArmrests=True,
            )
        )
        assert [w.path for w in result.warnings] == [
            "dimensions",
            "partitionCount",
            "hasArmrests",
        ]
        assert result.exit_code == 2
