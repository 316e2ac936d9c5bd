from aws_cdk import Duration, Stack
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# Powertools for AWS Lambda (Python) の公開レイヤー（pydantic v2 を同梱）
POWERTOOLS_LAYER_ARN = (
    "arn:aws:lambda:{region}:017000801446:layer:"
    "AWSLambdaPowertoolsPythonV3-python313-x86_64:7"
)


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        flight_table: dynamodb.Table,
        booking_table: dynamodb.Table,
    ) -> None:
        super().__init__(scope, id)

        self._flight_table = flight_table
        self._booking_table = booking_table
        self._powertools_layer = _lambda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            POWERTOOLS_LAYER_ARN.format(region=Stack.of(self).region),
        )

        self.book_flight = self._create_function(
            "BookFlightLambda",
            "airline.flight_booking.handlers.book.lambda_handler",
        )

        self.get_booking = self._create_function(
            "GetBookingLambda",
            "airline.flight_booking.handlers.get_booking.lambda_handler",
        )

        # 予約トランザクションは flights の更新と bookings への登録を行う
        flight_table.grant_read_write_data(self.book_flight)
        booking_table.grant_read_write_data(self.book_flight)

        booking_table.grant_read_data(self.get_booking)

        self.all_functions = [self.book_flight, self.get_booking]

    def _create_function(self, id: str, handler: str) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._powertools_layer],
            timeout=Duration.seconds(10),
            environment={
                "FLIGHT_TABLE_NAME": self._flight_table.table_name,
                "BOOKING_TABLE_NAME": self._booking_table.table_name,
                "POWERTOOLS_SERVICE_NAME": "flight-booking",
            },
        )
