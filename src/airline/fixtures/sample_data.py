"""サンプルデータ

座席数は held_seats + 指定済み座席数 + available_seats == total_seats を満たすように揃えてある。
"""

from airline.flight_booking.domain.entity import Booking, Flight
from airline.flight_booking.domain.value_object import (
    BookingId,
    FlightNumber,
    FlightPrimaryKey,
)
from airline.flight_booking.infrastructure.item_models import (
    PassengerItem,
    PreferencesItem,
)

# LHR -> CDG 2025-12-15T10:00Z
LHR_CDG_DEPARTURE = 1765792800
# AMS -> FRA 2025-05-15T08:00Z
AMS_FRA_DEPARTURE = 1747296000
# MAD -> LIS 2025-06-01T12:00Z
MAD_LIS_DEPARTURE = 1748779200
# FCO -> MUC 2025-08-01T14:15Z
FCO_MUC_DEPARTURE = 1754057700
# BER -> VIE 2026-09-21T17:30Z
BER_VIE_DEPARTURE = 1790011800


def passengers() -> list[PassengerItem]:
    return [
        PassengerItem(
            email_address="jxn.stove@email.com",
            full_name="Jon Snow",
            birthday=157766400,
            frequent_flyer_id="AMS4564",
            preferences=PreferencesItem(
                seat_preference="Window", timezone="Europe/Bucharest"
            ),
        ),
        PassengerItem(
            email_address="harry.soktor@email.com",
            full_name="Harry Potter",
            birthday=1183766400,
            frequent_flyer_id="BASS4565",
            preferences=PreferencesItem(
                seat_preference="Window",
                meal_preference=["Vegan"],
                timezone="Europe/Chisinau",
            ),
        ),
        PassengerItem(
            email_address="vlad.topee@gmail.com",
            full_name="Vlad Tapes",
            birthday=-11676096000,
            frequent_flyer_id="C44455778",
            preferences=PreferencesItem(
                seat_preference="Aisle",
                language="Spanish",
                timezone="Europe/Bucharest",
            ),
        ),
        PassengerItem(
            email_address="sherlock.homes@email.com",
            full_name="Sherlock Homes",
            birthday=-157766400,
            frequent_flyer_id="D73979865",
            preferences=PreferencesItem(
                meal_preference=["Gluten-Free"],
                language="English",
                accessibility_requirements=["Wheelchair Access"],
            ),
        ),
    ]


def flights() -> list[Flight]:
    return [
        Flight.create(
            primary_key=FlightPrimaryKey.from_components(
                "LHR", "CDG", LHR_CDG_DEPARTURE
            ),
            flight_number=FlightNumber("BA123"),
            airplane_model="Airbus A320",
            total_seats=180,
        ),
        Flight(
            id=FlightPrimaryKey.from_raw("AMS#FRA#2025-05-15", "0800"),
            flight_number=FlightNumber("KL456"),
            airplane_model="Boeing 737-800",
            total_seats=161,
            available_seats=150,
            held_seats=10,
            claimed_seat_map={"1A": "0159b675-909c-72bc-bd49-07b67670039g"},
        ),
        Flight(
            id=FlightPrimaryKey.from_raw("MAD#LIS#2025-06-01", "1200"),
            flight_number=FlightNumber("IB789"),
            airplane_model="Airbus A320",
            total_seats=180,
            available_seats=60,
            held_seats=119,
            claimed_seat_map={"2B": "0159b66b-9276-7e44-bd46-88565729fc71"},
        ),
        Flight(
            id=FlightPrimaryKey.from_raw("FCO#MUC#2025-08-01", "1415"),
            flight_number=FlightNumber("LH234"),
            airplane_model="Airbus A320",
            total_seats=180,
            available_seats=175,
            held_seats=4,
            claimed_seat_map={"3C": "0159b66d-30dc-7de9-9671-46a139874465"},
        ),
        Flight(
            id=FlightPrimaryKey.from_raw("BER#VIE#2026-09-21", "1730"),
            flight_number=FlightNumber("OS567"),
            airplane_model="Embraer E195",
            total_seats=120,
            available_seats=2,
            held_seats=117,
            claimed_seat_map={"4D": "0159b674-ddfs-7134-b45fe-8c1da462rec3"},
        ),
    ]


def bookings() -> list[Booking]:
    return [
        Booking(
            customer_email="jxn.stove@email.com",
            booking_id=BookingId("0159b675-909c-72bc-bd49-07b67670039g"),
            flight_number=FlightNumber("KL456"),
            source="AMS",
            destination="FRA",
            departure_date_time=AMS_FRA_DEPARTURE,
            seat_number="1A",
            fare_class="Economy",
        ),
        Booking(
            customer_email="jxn.stove@email.com",
            booking_id=BookingId("0159b66b-9276-7e44-bd46-88565729fc71"),
            flight_number=FlightNumber("IB789"),
            source="MAD",
            destination="LIS",
            departure_date_time=MAD_LIS_DEPARTURE,
            seat_number="2B",
            fare_class="Business",
        ),
        Booking(
            customer_email="harry.soktor@email.com",
            booking_id=BookingId("0159b66d-30dc-7de9-9671-46a139874465"),
            flight_number=FlightNumber("LH234"),
            source="FCO",
            destination="MUC",
            departure_date_time=FCO_MUC_DEPARTURE,
            seat_number="3C",
            fare_class="Economy Plus",
        ),
        Booking(
            customer_email="harry.soktor@email.com",
            booking_id=BookingId("0159b674-ddfs-7134-b45fe-8c1da462rec3"),
            flight_number=FlightNumber("OS567"),
            source="BER",
            destination="VIE",
            departure_date_time=BER_VIE_DEPARTURE,
            seat_number="4D",
            fare_class="Economy",
        ),
    ]
