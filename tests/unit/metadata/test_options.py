"""Tests for StatOptions handling."""

import pytest
from fsstat.core.errors import InvalidArgumentTypeError, NotImplementedFeatureError
from fsstat.metadata.options import BIGINT_FEATURE, StatOptions, check_options, coerce_options


class TestCoerceOptions:
    """Tests for coerce_options."""

    def test_none_gives_defaults(self) -> None:
        assert coerce_options(None) == StatOptions()
        assert coerce_options(None).bigint is False

    def test_mapping(self) -> None:
        assert coerce_options({"bigint": False}).bigint is False
        assert coerce_options({"bigint": True}).bigint is True

    def test_instance_passed_through(self) -> None:
        opts = StatOptions(bigint=True)
        assert coerce_options(opts) is opts

    def test_unknown_keys_tolerated(self) -> None:
        """Keys other than bigint are accepted and ignored."""
        opts = coerce_options({"throwIfNoEntry": False})
        assert opts.bigint is False

    def test_invalid_type(self) -> None:
        with pytest.raises(InvalidArgumentTypeError):
            coerce_options(42)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [None, 2, "maybe", [True]])
    def test_non_boolean_bigint(self, value: object) -> None:
        """Invalid bigint values raise the package's own argument error."""
        with pytest.raises(InvalidArgumentTypeError, match='"options.bigint" argument'):
            coerce_options({"bigint": value})

    def test_options_frozen(self) -> None:
        opts = StatOptions()
        with pytest.raises(ValueError):
            opts.bigint = True  # type: ignore[misc]


class TestCheckOptions:
    """Tests for check_options."""

    def test_default_options_accepted(self) -> None:
        check_options(StatOptions())

    def test_bigint_false_accepted(self) -> None:
        check_options(StatOptions(bigint=False))

    def test_bigint_rejected(self) -> None:
        """bigint mode is unsupported and never silently ignored."""
        with pytest.raises(NotImplementedFeatureError) as exc_info:
            check_options(StatOptions(bigint=True))
        assert exc_info.value.feature == BIGINT_FEATURE
        assert "bigint: true" in str(exc_info.value)
