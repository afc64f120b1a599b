"""
Repository tests against an in-memory SQLite database.

Covers the generic repository (QueryOptions, exists, CRUD) and the
residence availability search.
"""

from datetime import date

import pytest

from airbb.core.database.entities import Location, Reservation, Residence, User
from airbb.core.database.repositories import QueryOptions
from airbb.core.models.domain.booking import FilterCriteria
from airbb.core.models.domain.enums import UserType

pytestmark = pytest.mark.asyncio


class TestGenericRepository:
    async def test_get_all_defaults_to_primary_key_order(self, repos, seeded):
        locations = await repos.locations.get_all()
        assert [loc.location_id for loc in locations] == sorted([seeded.chicago_id, seeded.new_york_id])

    async def test_query_options_filter_order_and_page(self, repos, seeded):
        options = QueryOptions(
            filters=[Residence.price_per_night > 100],
            order_by=[Residence.price_per_night.desc()],
            skip=1,
            take=1,
        )
        residences = await repos.residences.get_all(options)
        assert [r.name for r in residences] == ["Midtown Studio"]

    async def test_first_returns_none_when_nothing_matches(self, repos, seeded):
        assert await repos.residences.first(QueryOptions(filters=[Residence.guest_number > 40])) is None

    async def test_includes_eager_load_relationships(self, repos, seeded):
        residence = await repos.residences.first(
            QueryOptions(filters=[Residence.residence_id == seeded.studio_id], includes=[Residence.location])
        )
        assert residence.location.name == "New York"

    async def test_exists(self, repos, seeded):
        assert await repos.locations.exists(Location.name == "Chicago")
        assert not await repos.locations.exists(Location.name == "Paris")

    async def test_create_update_delete(self, repos):
        location = await repos.locations.create(Location(name="Boston"))
        assert location.location_id is not None

        location.name = "Cambridge"
        await repos.locations.update(location)
        assert (await repos.locations.get_by_id(location.location_id)).name == "Cambridge"

        assert await repos.locations.delete(location.location_id) is True
        assert await repos.locations.get_by_id(location.location_id) is None
        assert await repos.locations.delete(location.location_id) is False

    async def test_list_with_equality_filters_and_paging(self, repos, seeded):
        residences = await repos.residences.list(filters={"location_id": seeded.chicago_id, "unknown": 1})
        assert {r.name for r in residences} == {"Lakeview Loft", "Wicker Park House"}
        assert len(await repos.residences.list(limit=1, offset=1)) == 1


class TestLocationAndUserRepositories:
    async def test_all_by_name(self, repos, seeded):
        await repos.locations.create(Location(name="Atlanta"))
        assert [loc.name for loc in await repos.locations.all_by_name()] == ["Atlanta", "Chicago", "New York"]

    async def test_get_by_name_ignores_case(self, repos, seeded):
        location = await repos.locations.get_by_name("  chicago ")
        assert location.location_id == seeded.chicago_id

    async def test_owners_only(self, repos, seeded):
        await repos.users.create(User(name="Another Owner", email="o2@example.com", user_type=UserType.owner))
        owners = await repos.users.owners()
        assert [u.name for u in owners] == ["Another Owner", "Olivia Owner"]
        assert all(u.user_type == UserType.owner for u in owners)

    async def test_user_type_round_trips(self, repos, seeded):
        user = await repos.users.get_by_id(seeded.owner_id)
        assert user.user_type == UserType.owner
        assert await repos.users.user_exists(seeded.client_id)
        assert not await repos.users.user_exists(999)


class TestResidenceSearch:
    async def test_no_criteria_returns_everything(self, repos, seeded):
        assert len(await repos.residences.search(None)) == 3
        assert len(await repos.residences.search(FilterCriteria())) == 3

    async def test_location_filter(self, repos, seeded):
        residences = await repos.residences.search(FilterCriteria(location_id=seeded.new_york_id))
        assert [r.name for r in residences] == ["Midtown Studio"]
        assert residences[0].location.name == "New York"

    async def test_zero_location_is_ignored(self, repos, seeded):
        assert len(await repos.residences.search(FilterCriteria(location_id=0))) == 3

    async def test_guest_number_is_a_minimum(self, repos, seeded):
        residences = await repos.residences.search(FilterCriteria(guest_number=4))
        assert {r.name for r in residences} == {"Lakeview Loft", "Wicker Park House"}

    async def test_overlapping_stay_excludes_booked_residence(self, repos, seeded):
        criteria = FilterCriteria(check_in_date=date(2030, 6, 12), check_out_date=date(2030, 6, 20))
        names = {r.name for r in await repos.residences.search(criteria)}
        assert "Lakeview Loft" not in names
        assert names == {"Wicker Park House", "Midtown Studio"}

    async def test_back_to_back_stay_is_available(self, repos, seeded):
        criteria = FilterCriteria(check_in_date=date(2030, 6, 15), check_out_date=date(2030, 6, 18))
        assert "Lakeview Loft" in {r.name for r in await repos.residences.search(criteria)}

    async def test_single_date_does_not_filter_on_availability(self, repos, seeded):
        criteria = FilterCriteria(check_in_date=date(2030, 6, 12))
        assert len(await repos.residences.search(criteria)) == 3

    async def test_combined_criteria(self, repos, seeded):
        criteria = FilterCriteria(
            location_id=seeded.chicago_id,
            guest_number=2,
            check_in_date=date(2030, 6, 9),
            check_out_date=date(2030, 6, 11),
        )
        assert [r.name for r in await repos.residences.search(criteria)] == ["Wicker Park House"]

    async def test_get_with_details(self, repos, seeded):
        residence = await repos.residences.get_with_details(seeded.loft_id)
        assert residence.owner.name == "Olivia Owner"
        assert residence.location.name == "Chicago"
        assert len(residence.reservations) == 1
        assert await repos.residences.get_with_details(999) is None


class TestReservationRepository:
    async def test_has_overlap(self, repos, seeded):
        assert await repos.reservations.has_overlap(seeded.loft_id, date(2030, 6, 14), date(2030, 6, 16))
        assert not await repos.reservations.has_overlap(seeded.loft_id, date(2030, 6, 15), date(2030, 6, 16))
        assert not await repos.reservations.has_overlap(seeded.house_id, date(2030, 6, 10), date(2030, 6, 15))

    async def test_has_overlap_can_exclude_a_reservation(self, repos, seeded):
        assert not await repos.reservations.has_overlap(
            seeded.loft_id, date(2030, 6, 10), date(2030, 6, 15), exclude_id=seeded.booked_reservation_id
        )

    async def test_for_residence_orders_by_start_date(self, repos, seeded):
        await repos.reservations.create(
            Reservation(
                residence_id=seeded.loft_id,
                user_id=seeded.client_id,
                reservation_start_date=date(2030, 5, 1),
                reservation_end_date=date(2030, 5, 3),
            )
        )
        stays = await repos.reservations.for_residence(seeded.loft_id)
        assert [r.reservation_start_date for r in stays] == [date(2030, 5, 1), date(2030, 6, 10)]

    async def test_entity_overlap_helper(self, repos, seeded):
        reservation = await repos.reservations.get_by_id(seeded.booked_reservation_id)
        assert reservation.overlaps(date(2030, 6, 1), date(2030, 6, 11))
        assert not reservation.overlaps(date(2030, 6, 1), date(2030, 6, 10))


class TestCascadingDeletes:
    async def test_deleting_location_removes_residences_and_reservations(self, repos, seeded):
        assert await repos.locations.delete(seeded.chicago_id)
        assert not await repos.residences.residence_exists(seeded.loft_id)
        assert not await repos.residences.residence_exists(seeded.house_id)
        assert await repos.reservations.get_all() == []
        assert await repos.residences.residence_exists(seeded.studio_id)

    async def test_deleting_owner_removes_residences(self, repos, seeded):
        assert await repos.users.delete(seeded.owner_id)
        assert await repos.residences.get_all() == []

    async def test_foreign_keys_cascade_in_the_database(self):
        for table, column in [
            (Residence.__table__, "location_id"),
            (Residence.__table__, "owner_id"),
            (Reservation.__table__, "residence_id"),
            (Reservation.__table__, "user_id"),
        ]:
            (foreign_key,) = table.c[column].foreign_keys
            assert foreign_key.ondelete == "CASCADE"
