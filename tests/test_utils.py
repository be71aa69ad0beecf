import pytest

from officedesk.exceptions import BadRequestException, ConflictException, NotFoundException
from officedesk.models.enums import OfficeCategory
from officedesk.utils import find_or_throw_not_found, throw_conflict_if_found, validate_office_category


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("WSO", OfficeCategory.WSO),
        ("wso", OfficeCategory.WSO),
        ("Water Supply", OfficeCategory.WSO),
        ("road signs and traffic lights", OfficeCategory.RSTLO),
        (" PGAPO ", OfficeCategory.PGAPO),
    ],
)
def test_validate_office_category_accepts_names_and_values(raw, expected):
    assert validate_office_category(raw) is expected


@pytest.mark.parametrize("raw", ["", "Bakery", "W SO"])
def test_validate_office_category_rejects_unknown(raw):
    with pytest.raises(BadRequestException) as exc_info:
        validate_office_category(raw)
    assert exc_info.value.status_code == 400


def test_find_or_throw_not_found():
    assert find_or_throw_not_found([1, 2, 3], lambda n: n > 1, "none") == 2
    with pytest.raises(NotFoundException, match="nothing big"):
        find_or_throw_not_found([1, 2, 3], lambda n: n > 10, "nothing big")


def test_throw_conflict_if_found():
    throw_conflict_if_found(["a", "b"], lambda s: s == "c", "dup")
    with pytest.raises(ConflictException, match="dup"):
        throw_conflict_if_found(["a", "b"], lambda s: s == "a", "dup")
