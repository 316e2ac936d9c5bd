from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as dynamodb
from constructs import Construct


class Database(Construct):
    """DynamoDB Construct

    - flights: RouteByDay (PK) + DepartureTime (SK)
    - bookings: CustomerEmail (PK) + BookingID (SK)
    - passengers: EmailAddress (PK)
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.flight_table = self._create_table(
            "FlightTable",
            table_name="flights",
            partition_key="RouteByDay",
            sort_key="DepartureTime",
        )

        self.booking_table = self._create_table(
            "BookingTable",
            table_name="bookings",
            partition_key="CustomerEmail",
            sort_key="BookingID",
        )

        self.passenger_table = self._create_table(
            "PassengerTable",
            table_name="passengers",
            partition_key="EmailAddress",
        )

    def _create_table(
        self,
        id: str,
        table_name: str,
        partition_key: str,
        sort_key: str | None = None,
    ) -> dynamodb.Table:
        return dynamodb.Table(
            self,
            id,
            table_name=table_name,
            partition_key=dynamodb.Attribute(
                name=partition_key, type=dynamodb.AttributeType.STRING
            ),
            sort_key=(
                dynamodb.Attribute(name=sort_key, type=dynamodb.AttributeType.STRING)
                if sort_key
                else None
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,
        )
