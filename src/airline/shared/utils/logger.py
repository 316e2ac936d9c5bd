import os

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = "flight-booking"


def get_logger(service_name: str | None = None) -> Logger:
    """Powertools Logger を返す

    service_name 未指定時は POWERTOOLS_SERVICE_NAME、それもなければ既定のサービス名を使う。
    """
    return Logger(
        service=service_name
        or os.getenv("POWERTOOLS_SERVICE_NAME", DEFAULT_SERVICE_NAME)
    )
