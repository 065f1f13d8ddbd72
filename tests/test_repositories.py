from datetime import date
from decimal import Decimal

from models.booking import Booking
from models.customer import Customer
from models.maintenance import MaintenanceCompany, Repair
from models.room import Assignment, Room
from repositories.booking_repo import BookingRepository
from repositories.customer_repo import CustomerRepository
from repositories.maintenance_repo import MaintenanceRepository
from repositories.room_repo import RoomRepository


def _jane():
    return Customer("Jane", "Doe", "1 Main St", "5551234", date(1990, 5, 17), "Female")


def test_customer_gets_next_id_from_insert(fake_db):
    fake_db.queue(("customerid",), [(42,)])

    customer = CustomerRepository().add(_jane())

    sql, params = fake_db.executed[0]
    assert "COALESCE(MAX(customerID), 0) + 1 FROM Customer" in sql
    assert sql.endswith("RETURNING customerID;")
    assert params == ("Jane", "Doe", "1 Main St", "5551234", date(1990, 5, 17), "Female")
    assert customer.id == 42


def test_customer_name_lookup_takes_first_match(fake_db):
    fake_db.queue(("customerid",), [(3,)])

    assert CustomerRepository().find_id_by_name("Jane", "Doe") == 3
    sql, params = fake_db.executed[0]
    assert "ORDER BY customerID LIMIT 1" in sql
    assert params == ("Jane", "Doe")


def test_customer_name_lookup_miss(fake_db):
    assert CustomerRepository().find_id_by_name("No", "Body") is None


def test_room_number_is_scoped_to_hotel(fake_db):
    fake_db.queue(("roomno",), [(11,)])

    room = RoomRepository().add(Room(hotel_id=5, room_type="Suite"))

    sql, params = fake_db.executed[0]
    assert "SELECT COALESCE(MAX(roomNo), 0) + 1 FROM Room WHERE hotelID = %s" in sql
    assert params == (5, 5, "Suite")
    assert room.room_no == 11


def test_assignment_gets_next_id(fake_db):
    fake_db.queue(("asgid",), [(8,)])

    assignment = RoomRepository().assign(Assignment(staff_id=100, hotel_id=5, room_no=2))

    assert assignment.id == 8
    assert fake_db.executed[0][1] == (100, 5, 2)


def test_available_rooms_excludes_booked_rooms_of_same_hotel(fake_db, capsys):
    fake_db.queue(("available",), [(4,)])

    assert RoomRepository().count_available(5) == 1

    sql, params = fake_db.executed[0]
    assert "NOT EXISTS" in sql
    assert "B.hotelID = R.hotelID AND B.roomNo = R.roomNo" in sql
    assert params == (5,)
    assert capsys.readouterr().out == "available\n4\n"


def test_booking_insert(fake_db):
    fake_db.queue(("bid",), [(9,)])
    booking = Booking(3, 5, 2, date(2024, 3, 5), 2, Decimal("199.99"))

    BookingRepository().add(booking)

    assert booking.id == 9
    assert fake_db.executed[0][1] == (3, 5, 2, date(2024, 3, 5), 2, Decimal("199.99"))


def test_week_listing_uses_open_start_closed_end(fake_db):
    BookingRepository().list_between(5, date(2024, 3, 1), date(2024, 3, 8))

    sql, params = fake_db.executed[0]
    assert "bookingDate > %s AND bookingDate <= %s" in sql
    assert params == (5, date(2024, 3, 1), date(2024, 3, 8))


def test_top_k_orders_by_price_and_limits(fake_db, capsys):
    fake_db.queue(("bid", "price"), [(4, Decimal("300")), (1, Decimal("250"))])

    count = BookingRepository().top_for_customer(3, 2)

    sql, params = fake_db.executed[0]
    assert "ORDER BY price DESC LIMIT %s" in sql
    assert params == (3, 2)
    assert count == 2
    prices = [Decimal(line.split("\t")[1]) for line in capsys.readouterr().out.splitlines()[1:]]
    assert prices == sorted(prices, reverse=True)


def test_total_cost_range_is_inclusive(fake_db):
    BookingRepository().total_cost(3, 5, date(2024, 1, 1), date(2024, 12, 31))

    sql, params = fake_db.executed[0]
    assert "SUM(price)" in sql
    assert "bookingDate >= %s AND bookingDate <= %s" in sql
    assert params == (5, 3, date(2024, 1, 1), date(2024, 12, 31))


def test_company_and_repair_inserts(fake_db):
    fake_db.queue(("cmpid",), [(2,)]).queue(("rid",), [(17,)])
    repo = MaintenanceRepository()

    company = repo.add_company(MaintenanceCompany("FixIt", "2 Side St", "TRUE"))
    repair = repo.add_repair(Repair(5, 2, company.id, date(2024, 2, 2), "leak", "plumbing"))

    assert (company.id, repair.id) == (2, 17)
    assert fake_db.executed[1][1] == (5, 2, 2, date(2024, 2, 2), "leak", "plumbing")


def test_repairs_per_year_groups_by_year(fake_db):
    MaintenanceRepository().repairs_per_year(5, 2)

    sql, params = fake_db.executed[0]
    assert "GROUP BY EXTRACT(YEAR FROM repairDate)" in sql
    assert params == (5, 2)


def test_top_companies_by_repair_count(fake_db):
    MaintenanceRepository().top_companies_by_repairs(0)

    sql, params = fake_db.executed[0]
    assert "ORDER BY repairs DESC LIMIT %s" in sql
    assert params == (0,)


def test_companies_sharing_a_name_are_counted_separately(fake_db, capsys):
    fake_db.queue(("name", "repairs"), [("FixIt", 5), ("FixIt", 2)])

    assert MaintenanceRepository().top_companies_by_repairs(3) == 2

    assert "GROUP BY C.cmpID, C.name" in fake_db.statements[0]
    assert capsys.readouterr().out.splitlines() == ["name\trepairs", "FixIt\t5", "FixIt\t2"]
