"""
Unit tests for the request and response models: field limits, the user
contact rule, residence build year and reservation dates.
"""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from airbb.core.models.domain.enums import UserType
from airbb.core.models.io import (
    CancelReservationRequest,
    LocationCreate,
    ResidenceCreate,
    ReserveRequest,
    UserCreate,
)
from airbb.core.models.io.users import CONTACT_REQUIRED_MESSAGE


def residence_payload(**overrides) -> dict:
    payload = {
        "name": "Lakeview Loft",
        "residence_picture": "lakeview.jpg",
        "location_id": 1,
        "owner_id": 2,
        "guest_number": 4,
        "bedroom_number": 2,
        "bathroom_number": 1,
        "built_year": 2005,
        "price_per_night": 150.0,
    }
    payload.update(overrides)
    return payload


class TestLocationCreate:
    def test_name_is_stripped(self):
        assert LocationCreate(name="  Chicago ").name == "Chicago"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            LocationCreate(name="   ")

    def test_name_longer_than_100_rejected(self):
        with pytest.raises(ValidationError):
            LocationCreate(name="x" * 101)


class TestUserCreate:
    def test_phone_only_is_enough(self):
        user = UserCreate(name="Pat", phone_number="312-555-0100")
        assert user.email is None
        assert user.user_type == UserType.client

    def test_email_only_is_enough(self):
        assert UserCreate(name="Pat", email="pat@example.com").phone_number is None

    def test_missing_contact_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            UserCreate(name="Pat")
        assert CONTACT_REQUIRED_MESSAGE in str(exc_info.value)

    def test_blank_contact_counts_as_missing(self):
        with pytest.raises(ValidationError):
            UserCreate(name="Pat", phone_number="  ", email="")

    @pytest.mark.parametrize("ssn", ["123456789", "12-345-6789", "abc-de-fghi"])
    def test_malformed_ssn_rejected(self, ssn):
        with pytest.raises(ValidationError):
            UserCreate(name="Pat", email="pat@example.com", ssn=ssn)

    def test_well_formed_ssn_accepted(self):
        assert UserCreate(name="Pat", email="pat@example.com", ssn="123-45-6789").ssn == "123-45-6789"

    def test_malformed_email_rejected(self):
        with pytest.raises(ValidationError):
            UserCreate(name="Pat", email="not-an-email")

    def test_future_dob_rejected(self):
        with pytest.raises(ValidationError):
            UserCreate(name="Pat", email="pat@example.com", dob=date.today() + timedelta(days=1))

    def test_user_type_parsed_from_value(self):
        user = UserCreate(name="Pat", email="pat@example.com", user_type="Owner")
        assert user.user_type is UserType.owner


class TestResidenceCreate:
    def test_valid_payload(self):
        residence = ResidenceCreate(**residence_payload())
        assert residence.guest_number == 4

    @pytest.mark.parametrize(
        "field, value",
        [
            ("guest_number", 0),
            ("guest_number", 51),
            ("bedroom_number", -1),
            ("bathroom_number", 51),
            ("price_per_night", 0),
            ("built_year", 1799),
            ("built_year", date.today().year + 1),
        ],
    )
    def test_out_of_range_rejected(self, field, value):
        with pytest.raises(ValidationError):
            ResidenceCreate(**residence_payload(**{field: value}))

    def test_built_year_bounds_inclusive(self):
        assert ResidenceCreate(**residence_payload(built_year=1800)).built_year == 1800
        assert ResidenceCreate(**residence_payload(built_year=date.today().year)).built_year == date.today().year


class TestReservationRequests:
    def test_end_must_follow_start(self):
        with pytest.raises(ValidationError):
            ReserveRequest(residence_id=1, start_date=date(2030, 6, 10), end_date=date(2030, 6, 10))

    def test_valid_reserve_request(self):
        request = ReserveRequest(residence_id=1, start_date="2030-06-10", end_date="2030-06-12")
        assert request.end_date - request.start_date == timedelta(days=2)

    def test_cancel_defaults_to_zero(self):
        request = CancelReservationRequest()
        assert request.reservation_id == 0
        assert request.residence_id == 0
