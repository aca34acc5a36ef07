"""
Test suite for the employee service exception hierarchy.

System role: Verification of error messages and context details
"""

import pytest

from northwind.core.exceptions import (
    EmployeeNotFoundError,
    EmployeeServiceError,
    InvalidArgumentError,
)


class TestEmployeeServiceError:
    """Test suite for the base exception."""

    def test_str_should_omit_empty_details(self) -> None:
        """Test message-only rendering."""
        assert str(EmployeeServiceError("boom")) == "boom"

    def test_str_should_include_details(self) -> None:
        """Test details are appended to the message."""
        error = EmployeeServiceError("boom", {"key": "value"})

        assert str(error) == "boom | Details: {'key': 'value'}"
        assert error.message == "boom"


class TestEmployeeNotFoundError:
    """Test suite for EmployeeNotFoundError."""

    def test_message_should_reference_missing_id(self) -> None:
        """Test message names the identifier."""
        error = EmployeeNotFoundError(17)

        assert error.message == "Employee with ID 17 not found."
        assert error.employee_id == 17
        assert error.details == {"employee_id": 17}

    def test_should_be_catchable_as_base(self) -> None:
        """Test subclassing of the base error."""
        with pytest.raises(EmployeeServiceError):
            raise EmployeeNotFoundError(1)


class TestInvalidArgumentError:
    """Test suite for InvalidArgumentError."""

    def test_should_record_argument_name(self) -> None:
        """Test argument name lands in details."""
        error = InvalidArgumentError("missing", argument="session_factory")

        assert error.details == {"argument": "session_factory"}
        assert isinstance(error, EmployeeServiceError)


class TestDetailsOwnership:
    """Errors keep their own copy of the details they are given."""

    def test_not_found_should_not_modify_caller_details(self) -> None:
        """Test the caller's dict is left as passed."""
        # Arrange
        context = {"operation": "update"}

        # Act
        error = EmployeeNotFoundError(3, details=context)

        # Assert
        assert context == {"operation": "update"}
        assert error.details == {"operation": "update", "employee_id": 3}

    def test_invalid_argument_should_not_modify_caller_details(self) -> None:
        """Test the caller's dict is left as passed."""
        # Arrange
        context = {"caller": "wiring"}

        # Act
        error = InvalidArgumentError("missing", argument="session_factory", details=context)

        # Assert
        assert context == {"caller": "wiring"}
        assert error.details == {"caller": "wiring", "argument": "session_factory"}
