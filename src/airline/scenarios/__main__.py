import argparse
import sys

from botocore.exceptions import BotoCoreError, ClientError

from airline.fixtures.loader import load_sample_data
from airline.flight_booking.applications import (
    BookFlightOptimisticLockingService,
    BookFlightUseCase,
    NoLockingBookFlightService,
)
from airline.flight_booking.domain.enum import BookingStrategy
from airline.flight_booking.domain.factory import BookingFactory
from airline.flight_booking.domain.repository import FlightBookings
from airline.flight_booking.infrastructure.dynamodb_conditional_expression_repository import (
    DynamoDBConditionalExpressionFlightBookings,
)
from airline.flight_booking.infrastructure.dynamodb_full_item_versioned_repository import (
    DynamoDBFullItemVersionedFlightBookings,
)
from airline.flight_booking.infrastructure.dynamodb_version_guarded_repository import (
    DynamoDBVersionGuardedFlightBookings,
)
from airline.scenarios.catalog import SCENARIOS, Scenario
from airline.scenarios.runner import print_report, run_concurrent_bookings
from airline.shared.config import Settings, create_dynamodb_resource
from airline.shared.utils.logger import get_logger

logger = get_logger()

LOAD_FIXTURES = "load-fixtures"


def build_service(
    strategy: BookingStrategy, dynamodb, settings: Settings
) -> tuple[FlightBookings, BookFlightUseCase]:
    """戦略に対応するレポジトリとサービスを組み立てる"""
    if strategy == BookingStrategy.OPTIMISTIC_LOCKING:
        version_guarded = DynamoDBVersionGuardedFlightBookings(dynamodb, settings)
        return version_guarded, BookFlightOptimisticLockingService(version_guarded)

    if strategy == BookingStrategy.OPTIMISTIC_LOCKING_FULL_ITEM:
        full_item = DynamoDBFullItemVersionedFlightBookings(dynamodb, settings)
        return full_item, BookFlightOptimisticLockingService(full_item)

    conditional = DynamoDBConditionalExpressionFlightBookings(dynamodb, settings)
    return conditional, NoLockingBookFlightService(conditional)


def run_scenario(scenario: Scenario, dynamodb, settings: Settings) -> int:
    """シナリオを実行する

    予約が拒否されてもプロセスとしては成功（0）。予約リクエストがない場合と
    対象フライトが存在しない場合は 1 を返す。
    """
    if not scenario.requests:
        logger.error(f"Scenario {scenario.name} has no booking requests")
        return 1

    flight_bookings, service = build_service(scenario.strategy, dynamodb, settings)
    factory = BookingFactory()
    bookings = [
        factory.create(scenario.customer_email, request) for request in scenario.requests
    ]
    primary_key = bookings[0].flight_primary_key()

    if flight_bookings.find_flight(primary_key) is None:
        logger.error(
            f"Flight {primary_key} not found. Run '{LOAD_FIXTURES}' first",
        )
        return 1

    print(f"Scenario {scenario.name}: {scenario.description}")
    attempts = run_concurrent_bookings(service, bookings)
    print_report(flight_bookings, primary_key, attempts)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="airline-scenarios",
        description="Run concurrent flight booking scenarios against DynamoDB.",
    )
    parser.add_argument(
        "name",
        choices=[LOAD_FIXTURES, *SCENARIOS],
        help="Scenario to run, or load-fixtures to insert the sample data.",
    )
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    try:
        dynamodb = create_dynamodb_resource(settings)
        if args.name == LOAD_FIXTURES:
            load_sample_data(dynamodb, settings)
            return 0
        return run_scenario(SCENARIOS[args.name], dynamodb, settings)
    except (BotoCoreError, ClientError) as e:
        logger.exception(f"Scenario setup failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
