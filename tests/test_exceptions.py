"""Tests for the exception hierarchy."""

import pytest

from skyframes.exceptions import (
    CatalogInconsistencyError,
    FrameConversionError,
    FrameNotFoundError,
    FrameUnreachableError,
)


class TestFrameNotFoundError:
    def test_attributes_and_message(self):
        e = FrameNotFoundError("Lunar")
        assert e.name == "Lunar"
        assert str(e) == "Frame not found: 'Lunar'"

    def test_caught_as_value_error(self):
        with pytest.raises(ValueError):
            raise FrameNotFoundError("Lunar")


class TestFrameUnreachableError:
    def test_attributes_and_message(self):
        e = FrameUnreachableError("Horizon", "Island")
        assert (e.source, e.target) == ("Horizon", "Island")
        assert str(e) == "No transform path from 'Horizon' to 'Island'"


class TestCatalogInconsistencyError:
    def test_attributes_and_message(self):
        e = CatalogInconsistencyError("A", "B")
        assert (e.source, e.target) == ("A", "B")
        assert "'A' -> 'B'" in str(e)

    def test_caught_as_base(self):
        with pytest.raises(FrameConversionError):
            raise CatalogInconsistencyError("A", "B")
