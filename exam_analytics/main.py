"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service or prints one analytics snapshot.
"""

import argparse
import json
from datetime import date

import uvicorn

from exam_analytics.analytics import analytics_serialize_snapshot_result
from exam_analytics.bootstrap import bootstrap_create_analytics_service, bootstrap_create_application
from exam_analytics.config import config_configure_logging, config_load_settings


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Occupational exam analytics runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "snapshot"),
        help="Runtime command: `api` starts server, `snapshot` prints one analytics snapshot as JSON",
        type=str,
    )
    argument_parser.add_argument(
        "--year",
        dest="year",
        type=int,
        help="Optional calendar year charted by `snapshot`, current year when omitted",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    config_configure_logging(level=settings.log_level, json_output=settings.log_json)

    if parsed_arguments.command == "snapshot":
        analytics_service = bootstrap_create_analytics_service(settings=settings)
        reference_date = None if parsed_arguments.year is None else date(parsed_arguments.year, 1, 1)
        result = analytics_service.analytics_snapshot_build(reference_date=reference_date)
        print(json.dumps(analytics_serialize_snapshot_result(result), ensure_ascii=False, indent=2))
        return

    application = bootstrap_create_application()
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
