"""Unit tests for domain entities, value objects and errors.

Tests cover:
- FetchRequest validation and normalization
- Person immutability
- Error string representation and FetchFailedError wrapping
"""

from dataclasses import FrozenInstanceError

import pytest

from src.core.enums import ErrorCode
from src.core.errors import FetchFailedError
from src.core.result import Failure
from src.domain.entities.person import Person
from src.domain.errors import DecodeError, NoDataError, SwapiError, TransportError
from src.domain.value_objects.fetch_request import FetchRequest


@pytest.mark.unit
class TestFetchRequest:
    """Tests for FetchRequest value object."""

    def test_defaults_to_get(self):
        """Method defaults to GET."""
        request = FetchRequest(url="https://swapi.dev/api/people/1")
        assert request.method == "GET"

    def test_method_upper_cased(self):
        """Method is normalized to upper case."""
        request = FetchRequest(url="https://swapi.dev/api/people/1", method="get")
        assert request.method == "GET"

    def test_empty_url_rejected(self):
        """Empty URL raises ValueError."""
        with pytest.raises(ValueError, match="url"):
            FetchRequest(url="")

    def test_empty_method_rejected(self):
        """Empty method raises ValueError."""
        with pytest.raises(ValueError, match="method"):
            FetchRequest(url="https://swapi.dev/api/people/1", method="")

    def test_is_immutable(self):
        """Requests cannot be mutated after construction."""
        request = FetchRequest(url="https://swapi.dev/api/people/1")
        with pytest.raises(FrozenInstanceError):
            request.url = "https://swapi.dev/api/people/2"  # type: ignore[misc]


@pytest.mark.unit
class TestPerson:
    """Tests for Person entity."""

    def test_is_immutable(self):
        """Person is read-only after creation."""
        person = Person(name="Leia Organa")
        with pytest.raises(FrozenInstanceError):
            person.name = "Han Solo"  # type: ignore[misc]

    def test_equality_by_value(self):
        """Two persons with the same name compare equal."""
        assert Person(name="Leia Organa") == Person(name="Leia Organa")


@pytest.mark.unit
class TestSwapiErrors:
    """Tests for the error taxonomy."""

    @pytest.mark.parametrize("error_cls", [TransportError, NoDataError, DecodeError])
    def test_all_errors_are_swapi_errors(self, error_cls):
        """Every concrete error derives from SwapiError."""
        assert issubclass(error_cls, SwapiError)

    def test_str_includes_code_and_message(self):
        """String form is '<code>: <message>'."""
        error = TransportError(
            code=ErrorCode.SWAPI_TRANSPORT_FAILED,
            message="connection reset",
        )
        assert str(error) == "swapi_transport_failed: connection reset"

    def test_fetch_failed_error_keeps_error_unchanged(self):
        """The wrapped domain error is exposed as-is."""
        error = NoDataError(code=ErrorCode.SWAPI_NO_DATA, message="No data")
        wrapped = FetchFailedError(error)

        assert wrapped.error is error
        assert str(wrapped) == "swapi_no_data: No data"

    def test_failure_matched_by_keyword_and_wrapped(self):
        """Failure only matches by keyword; its error wraps unchanged."""
        error = DecodeError(code=ErrorCode.SWAPI_DECODE_FAILED, message="bad")
        result = Failure(error=error)

        match result:
            case Failure(error=matched):
                wrapped = FetchFailedError(matched)

        assert wrapped.error is error

    def test_failure_has_no_positional_pattern(self):
        with pytest.raises(TypeError):
            match Failure(error=NoDataError(code=ErrorCode.SWAPI_NO_DATA, message="x")):
                case Failure(_):
                    pass
