#
# Real - Errors Tests
#

# Third Party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from real import errors


# Tests ----------------------------------------------------------------------------------------------------------------

class TestHierarchy:

    @pytest.mark.parametrize(
        "error, bases",
        [
            pytest.param(errors.SizeFormatError, (errors.QuantityFormatError, ValueError), id="size-format"),
            pytest.param(errors.SpeedFormatError, (errors.QuantityFormatError, ValueError), id="speed-format"),
            pytest.param(errors.UnknownUnitError, (errors.QuantityError, ValueError), id="unknown-unit"),
            pytest.param(errors.SizeOverflowError, (errors.QuantityOverflowError, OverflowError), id="size-overflow"),
            pytest.param(errors.SpeedOverflowError, (errors.QuantityOverflowError, ValueError), id="speed-overflow"),
            pytest.param(errors.InvalidArgumentError, (errors.QuantityError, ValueError), id="invalid-argument"),
        ],
    )
    def test_bases(self, error, bases):
        for base in bases:
            assert issubclass(error, base)

    def test_all_exported(self):
        for name in errors.__all__:
            assert issubclass(getattr(errors, name), errors.QuantityError)
