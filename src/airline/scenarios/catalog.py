from dataclasses import dataclass, field

from airline.fixtures.sample_data import (
    AMS_FRA_DEPARTURE,
    BER_VIE_DEPARTURE,
    LHR_CDG_DEPARTURE,
)
from airline.flight_booking.domain.enum import BookingStrategy
from airline.flight_booking.domain.factory import BookingDetails

SHERLOCK = "sherlock.homes@email.com"


@dataclass(frozen=True)
class Scenario:
    """並行予約のデモシナリオ"""

    name: str
    description: str
    strategy: BookingStrategy
    requests: list[BookingDetails] = field(default_factory=list)
    customer_email: str = SHERLOCK


def _lhr_cdg(seat_number: str | None) -> BookingDetails:
    return {
        "flight_number": "BA123",
        "source": "LHR",
        "destination": "CDG",
        "departure_date_time": LHR_CDG_DEPARTURE,
        "seat_number": seat_number,
        "fare_class": "Economy",
    }


def _ams_fra(seat_number: str | None) -> BookingDetails:
    return {
        "flight_number": "KL456",
        "source": "AMS",
        "destination": "FRA",
        "departure_date_time": AMS_FRA_DEPARTURE,
        "seat_number": seat_number,
        "fare_class": "Economy",
    }


def _ber_vie(seat_number: str | None) -> BookingDetails:
    return {
        "flight_number": "OS567",
        "source": "BER",
        "destination": "VIE",
        "departure_date_time": BER_VIE_DEPARTURE,
        "seat_number": seat_number,
        "fare_class": "Economy",
    }


SCENARIOS: dict[str, Scenario] = {
    scenario.name: scenario
    for scenario in [
        Scenario(
            name="best-practice",
            description="Two users race for seat 2C on LHR-CDG using condition expressions",
            strategy=BookingStrategy.NO_LOCKING,
            requests=[_lhr_cdg("2C"), _lhr_cdg("2C")],
        ),
        Scenario(
            name="optimistic-locking",
            description="Two users race for seat 2D on AMS-FRA using the Version guard",
            strategy=BookingStrategy.OPTIMISTIC_LOCKING,
            requests=[_ams_fra("2D"), _ams_fra("2D")],
        ),
        Scenario(
            name="optimistic-locking-full-item",
            description=(
                "Two users race for seat 2E on AMS-FRA, writing the whole flight back "
                "under the Version guard"
            ),
            strategy=BookingStrategy.OPTIMISTIC_LOCKING_FULL_ITEM,
            requests=[_ams_fra("2E"), _ams_fra("2E")],
        ),
        Scenario(
            name="no-locking-held",
            description="Three seat-less bookings against the last two seats on BER-VIE",
            strategy=BookingStrategy.NO_LOCKING,
            requests=[_ber_vie(None), _ber_vie(None), _ber_vie(None)],
        ),
        Scenario(
            name="distinct-seats",
            description="Two users book different seats (5A, 5B) on LHR-CDG",
            strategy=BookingStrategy.NO_LOCKING,
            requests=[_lhr_cdg("5A"), _lhr_cdg("5B")],
        ),
    ]
}
