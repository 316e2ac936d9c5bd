from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Database, Functions


class AirlineBookingStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")

        fns = Functions(
            self,
            "Functions",
            flight_table=database.flight_table,
            booking_table=database.booking_table,
        )

        CfnOutput(self, "BookFlightFunctionName", value=fns.book_flight.function_name)
        CfnOutput(self, "FlightTableName", value=database.flight_table.table_name)
