# tests/test_validators.py
from __future__ import annotations

import pytest

from namefully.exceptions import InputError, ValidationError
from namefully.name import Name
from namefully.types import NameOrder, Namon
from namefully.utils import NameIndex
from namefully.validators import NAMON_RE, Validators, validator_for


@pytest.mark.parametrize(
    "token",
    [
        "John",
        "O'Neil",
        "Day-Lewis",
        "Le Pen",
        "de la Torre",
        "Ángela",
        "Zoë",
        "Дмитрий",
        "Αλέξανδρος",
    ],
)
def test_accepts_letters_with_connectors(token):
    assert NAMON_RE.match(token)


@pytest.mark.parametrize(
    "token",
    ["Sm1th", "Ph.D", "John  Smith", "-John", "John-", "@lice", "Jean--Luc", ""],
)
def test_rejects_digits_and_punctuation(token):
    assert not NAMON_RE.match(token)


def test_role_validators_raise_validation_error():
    with pytest.raises(ValidationError) as exc:
        Validators.prefix.validate("Ph+")
    assert exc.value.name_type == "prefix"

    with pytest.raises(ValidationError) as exc:
        Validators.first_name.validate("2Pac")
    assert exc.value.name_type == "firstName"


def test_wrong_shape_raises_input_error():
    with pytest.raises(InputError):
        Validators.first_name.validate(123)
    with pytest.raises(InputError):
        Validators.last_name.validate(["Smith"])
    with pytest.raises(InputError):
        Validators.suffix.validate(None)


def test_first_and_last_names_check_every_token():
    Validators.first_name.validate(Name.first("John", "Ben"))
    with pytest.raises(ValidationError):
        Validators.first_name.validate(Name.first("John", "B3n"))
    with pytest.raises(ValidationError):
        Validators.last_name.validate(Name.last("Smith", "D0e"))


class TestMiddleName:
    def test_single_or_list(self):
        Validators.middle_name.validate("Ben")
        Validators.middle_name.validate(["Ben", Name.middle("Carl")])

    def test_bad_content_in_list(self):
        with pytest.raises(ValidationError) as exc:
            Validators.middle_name.validate(["Ben", "C4rl"])
        assert exc.value.name_type == "middleName"

    def test_bad_shape_in_list(self):
        with pytest.raises(InputError):
            Validators.middle_name.validate(["Ben", 3])
        with pytest.raises(InputError):
            Validators.middle_name.validate({"value": "Ben"})


class TestArrayString:
    @pytest.mark.parametrize("count", [0, 1, 6])
    def test_arity(self, count):
        with pytest.raises(InputError):
            Validators.array_string.validate_index(["John"] * count)

    def test_content_follows_index(self):
        values = ["Smith", "John", "Ben"]
        Validators.array_string.validate(values, NameIndex.when(NameOrder.LAST_NAME, 3))

    def test_suffix_checked_at_five(self):
        with pytest.raises(ValidationError):
            Validators.array_string.validate(["Mr", "John", "Ben", "Smith", "Ph+"])


class TestArrayName:
    def test_requires_two_entries(self):
        with pytest.raises(InputError):
            Validators.array_name.validate([Name.first("John")])

    def test_requires_first_and_last(self):
        with pytest.raises(InputError):
            Validators.array_name.validate([Name.first("John"), Name.middle("Ben")])

    def test_requires_names(self):
        with pytest.raises(InputError):
            Validators.array_name.validate([Name.first("John"), "Smith"])

    def test_many_middle_names_are_fine(self):
        names = [Name.first("John")] + [Name.middle(m) for m in ("Ab", "Cd", "Ef", "Gh")]
        Validators.array_name.validate(names + [Name.last("Smith")])


class TestNama:
    def test_keys(self):
        with pytest.raises(InputError):
            Validators.nama.validate_keys({})
        with pytest.raises(InputError):
            Validators.nama.validate_keys({Namon.FIRST_NAME: "John"})
        with pytest.raises(InputError):
            Validators.nama.validate_keys({Namon.FIRST_NAME: "John", Namon.MIDDLE_NAME: "Ben"})

    def test_content(self):
        Validators.nama.validate({Namon.FIRST_NAME: "John", Namon.LAST_NAME: "Smith"})
        with pytest.raises(ValidationError):
            Validators.nama.validate(
                {Namon.FIRST_NAME: "John", Namon.LAST_NAME: "Smith", Namon.SUFFIX: "M.Sc."}
            )


def test_validator_for_each_role():
    assert validator_for(Namon.PREFIX) is Validators.prefix
    assert validator_for(Namon.MIDDLE_NAME) is Validators.middle_name
