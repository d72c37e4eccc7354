import pytest
from pydantic import ValidationError

from seq_ops import InvalidArgumentError, take
from seq_ops.core import args
from seq_ops.core.types import ArgumentViolation, Constraint


def sample(value, flag=None):
    args.expects(args.traversable, value)
    args.expects_optional([args.bool_, args.callable_], flag, 2)
    return True


class TestConstraints:
    def test_int_rejects_bool(self):
        assert args.int_(3)
        assert not args.int_(True)
        assert not args.int_(3.0)

    def test_natural_and_positive(self):
        assert args.natural(0)
        assert not args.natural(-1)
        assert args.positive(1)
        assert not args.positive(0)

    def test_traversable(self):
        assert args.traversable([])
        assert args.traversable({})
        assert args.traversable(iter([]))
        assert args.traversable({1})
        assert not args.traversable("abc")
        assert not args.traversable(b"abc")
        assert not args.traversable(5)

    def test_array_access(self):
        assert args.array_access({})
        assert args.array_access([])
        assert args.array_access((1,))
        assert not args.array_access(iter([]))
        assert not args.array_access("abc")

    def test_array_key(self):
        assert args.array_key("a")
        assert args.array_key(1)
        assert args.array_key((1, 2))
        assert not args.array_key([1])
        assert not args.array_key(([1], 2))

    def test_constraint_is_frozen(self):
        with pytest.raises(ValidationError):
            args.int_.name = "other"

    def test_constraint_requires_callable_check(self):
        with pytest.raises(ValidationError):
            Constraint(name="broken", check=42)

    def test_str(self):
        assert str(args.callable_) == "callable"


class TestExpects:
    def test_passes(self):
        assert sample([1], True)
        assert sample([1], len)
        assert sample([1])

    def test_error_message_names_caller_and_position(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            take([1, 2], "2")
        assert str(exc_info.value) == (
            "Argument 2 passed to seq_ops.sequences.take() must be int >= 0, str given"
        )

    def test_violation_details(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            sample([1], 5)
        violation = exc_info.value.violation
        assert violation.function == f"{__name__}.sample"
        assert violation.position == 2
        assert violation.expected == ("bool", "callable")
        assert violation.actual == "int"
        assert "must be bool or callable, int given" in violation.message

    def test_optional_accepts_none(self):
        args.expects_optional(args.int_, None, 3)

    def test_required_rejects_none(self):
        with pytest.raises(InvalidArgumentError, match="None given"):
            args.expects(args.int_, None)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            sample(5)


class TestArgumentViolation:
    def test_message(self):
        violation = ArgumentViolation(function="pkg.f", position=1, expected=("int",), actual="str")
        assert str(violation) == "Argument 1 passed to pkg.f() must be int, str given"

    def test_position_must_be_positive(self):
        with pytest.raises(ValidationError):
            ArgumentViolation(function="pkg.f", position=0, expected=("int",), actual="str")

    def test_expected_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            ArgumentViolation(function="pkg.f", position=1, expected=(), actual="str")


def test_get_type():
    assert args.get_type(None) == "None"
    assert args.get_type(1) == "int"
    assert args.get_type([]) == "list"

    class Record:
        pass

    assert args.get_type(Record()) == "Record"
