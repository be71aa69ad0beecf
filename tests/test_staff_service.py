"""Tests for StaffService: creation, authentication and office membership."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from officedesk.exceptions import BadRequestException, ConflictException, NotFoundException
from officedesk.models.enums import OfficeCategory, StaffRole
from officedesk.models.office import Office
from officedesk.models.staff import Staff
from officedesk.modules.auth.security import hash_password
from officedesk.modules.staff.service import StaffService
from tests.factories import make_office, make_staff


def _result(scalar=None, scalars=None):
    result = MagicMock()
    result.scalar_one_or_none.return_value = scalar
    result.scalars.return_value.all.return_value = scalars or []
    result.scalars.return_value.unique.return_value.all.return_value = scalars or []
    return result


@pytest.fixture
def mock_session():
    session = AsyncMock()
    session.add = MagicMock()
    session.flush = AsyncMock()
    return session


@pytest.fixture
def staff_service(mock_session):
    return StaffService(mock_session)


class TestCreateStaff:
    @pytest.mark.asyncio
    async def test_create_staff_success(self, staff_service, mock_session):
        office = Office(name="Waste Office", description="", category=OfficeCategory.WO, is_external=False)
        mock_session.execute.side_effect = [_result(scalar=None), _result(scalars=[office])]

        staff = await staff_service.create_staff(
            username="tosm1",
            name="Tosm",
            surname="One",
            password="pw",
            role="TOSM",
            office_names=["Waste Office"],
        )

        assert isinstance(staff, Staff)
        assert staff.role is StaffRole.TOSM
        assert staff.offices == [office]
        assert staff.password_hash != "pw"
        mock_session.add.assert_called_once_with(staff)
        mock_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_role_is_bad_request(self, staff_service, mock_session):
        with pytest.raises(BadRequestException, match="Invalid staff role"):
            await staff_service.create_staff("x", "X", "X", "pw", "Mayor")
        mock_session.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_role_value_instead_of_name_is_rejected(self, staff_service):
        with pytest.raises(BadRequestException):
            await staff_service.create_staff("x", "X", "X", "pw", StaffRole.ADMIN.value)

    @pytest.mark.asyncio
    async def test_duplicate_username_is_conflict(self, staff_service, mock_session):
        mock_session.execute.return_value = _result(scalar=make_staff("tosm1"))

        with pytest.raises(ConflictException):
            await staff_service.create_staff("tosm1", "T", "O", "pw", "TOSM")
        mock_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_office_is_not_found(self, staff_service, mock_session):
        mock_session.execute.side_effect = [_result(scalar=None), _result(scalars=[])]

        with pytest.raises(NotFoundException, match="Office Ghost Office not found"):
            await staff_service.create_staff("tosm1", "T", "O", "pw", "TOSM", ["Ghost Office"])
        mock_session.add.assert_not_called()


class TestAuthenticateStaff:
    @pytest.mark.asyncio
    async def test_valid_password(self, staff_service, mock_session):
        staff = make_staff("admin", StaffRole.ADMIN)
        staff.password_hash = hash_password("secret")
        mock_session.execute.return_value = _result(scalar=staff)

        assert await staff_service.authenticate_staff("admin", "secret") is staff

    @pytest.mark.asyncio
    async def test_wrong_password(self, staff_service, mock_session):
        staff = make_staff("admin", StaffRole.ADMIN)
        staff.password_hash = hash_password("secret")
        mock_session.execute.return_value = _result(scalar=staff)

        assert await staff_service.authenticate_staff("admin", "guess") is None

    @pytest.mark.asyncio
    async def test_unknown_user(self, staff_service, mock_session):
        mock_session.execute.return_value = _result(scalar=None)

        with patch("officedesk.modules.staff.service.verify_password") as verify:
            assert await staff_service.authenticate_staff("nobody", "pw") is None
        verify.assert_not_called()


class TestOfficeMembership:
    @pytest.mark.asyncio
    async def test_replace_offices(self, staff_service, mock_session):
        staff = make_staff("tosm1", offices=[make_office("Waste Office")])
        lighting = make_office("Public Lighting Office")
        mock_session.execute.side_effect = [_result(scalar=staff), _result(scalars=[lighting])]

        updated = await staff_service.update_staff_offices("tosm1", ["Public Lighting Office"])

        assert updated.offices == [lighting]

    @pytest.mark.asyncio
    async def test_replace_on_unknown_staff_is_not_found(self, staff_service, mock_session):
        mock_session.execute.return_value = _result(scalar=None)

        with pytest.raises(NotFoundException):
            await staff_service.update_staff_offices("ghost", [])

    @pytest.mark.asyncio
    async def test_add_existing_office_is_conflict(self, staff_service, mock_session):
        staff = make_staff("tosm1", offices=[make_office("Waste Office")])
        mock_session.execute.return_value = _result(scalar=staff)

        with pytest.raises(ConflictException):
            await staff_service.add_office_to_staff("tosm1", "Waste Office")

    @pytest.mark.asyncio
    async def test_add_office(self, staff_service, mock_session):
        staff = make_staff("tosm1", offices=[])
        waste = make_office("Waste Office")
        mock_session.execute.side_effect = [_result(scalar=staff), _result(scalars=[waste])]

        updated = await staff_service.add_office_to_staff("tosm1", "Waste Office")

        assert updated.offices == [waste]

    @pytest.mark.asyncio
    async def test_remove_office(self, staff_service, mock_session):
        waste = make_office("Waste Office")
        staff = make_staff("tosm1", offices=[waste])
        mock_session.execute.return_value = _result(scalar=staff)

        updated = await staff_service.remove_office_from_staff("tosm1", "Waste Office")

        assert updated.offices == []

    @pytest.mark.asyncio
    async def test_remove_office_not_held_is_not_found(self, staff_service, mock_session):
        mock_session.execute.return_value = _result(scalar=make_staff("tosm1", offices=[]))

        with pytest.raises(NotFoundException):
            await staff_service.remove_office_from_staff("tosm1", "Waste Office")


class TestListing:
    @pytest.mark.asyncio
    async def test_get_all_staff_returns_rows(self, staff_service, mock_session):
        rows = [make_staff("a"), make_staff("b")]
        mock_session.execute.return_value = _result(scalars=rows)

        assert await staff_service.get_all_staff(True) == rows
        mock_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_get_all_tosm_returns_rows(self, staff_service, mock_session):
        rows = [make_staff("t1")]
        mock_session.execute.return_value = _result(scalars=rows)

        assert await staff_service.get_all_tosm() == rows
