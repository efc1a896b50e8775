#!/usr/bin/env python3
"""Smoke run of the employee client against a live employee service.

    python3 scripts/employee_smoke.py [--base-url URL] [--employee-id N] [--name NAME]
                                      [--skip-error-probe] [--verbose]

Lists, reads, creates, updates and deletes an employee, then calls the error
endpoint. Exits with status 1 if any step that should succeed fails.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from employee_client.core.config import Settings  # noqa: E402
from employee_client.core.errors import ClientDataError, EmployeeClientError, ServiceError  # noqa: E402
from employee_client.models.employee import Employee  # noqa: E402
from employee_client.services.employee_client import EmployeeRestClient, create_employee_client  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Exercise every employee service endpoint once",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Employee service base URL (default: EMPLOYEE_SERVICE_BASE_URL)",
    )
    parser.add_argument(
        "--employee-id",
        type=int,
        default=1,
        help="Id of an employee that exists on the service",
    )
    parser.add_argument(
        "--name",
        default="Chris",
        help="First name to look up by name",
    )
    parser.add_argument(
        "--skip-error-probe",
        action="store_true",
        help="Do not call the error endpoint (it retries for several seconds)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


async def run_checks(client: EmployeeRestClient, args: argparse.Namespace) -> int:
    failures = 0

    try:
        employees = await client.retrieve_all_employees()
        logger.info("Listed %d employees", len(employees))

        employee = await client.retrieve_employee_by_id(args.employee_id)
        logger.info("Employee %d: %s %s", args.employee_id, employee.first_name, employee.last_name)

        by_name = await client.retrieve_employee_by_name(args.name)
        logger.info("Found %d employees named %s", len(by_name), args.name)

        created = await client.add_new_employee(
            Employee(age=54, first_name="Oleg", last_name="Olegov", gender="male", role="Cleaner")
        )
        logger.info("Created employee %s", created.id)

        if created.id is not None:
            updated = await client.update_employee(created.id, Employee(first_name="Oleg1", last_name="Olegov1"))
            logger.info("Updated employee %s: %s %s", updated.id, updated.first_name, updated.last_name)

            message = await client.delete_employee_by_id(created.id)
            logger.info("Delete response: %s", message)
    except EmployeeClientError:
        logger.exception("Smoke run failed")
        failures += 1

    try:
        await client.add_new_employee_custom_error_handling(Employee(age=54, last_name="Olegov"))
        logger.error("Create without first name was accepted")
        failures += 1
    except ClientDataError as err:
        logger.info("Create without first name rejected: %s", err.message)

    if not args.skip_error_probe:
        try:
            await client.error_endpoint()
            logger.error("Error endpoint returned a success response")
            failures += 1
        except ServiceError as err:
            logger.info("Error endpoint failed after retries: %s", err.message)

    return failures


async def smoke(args: argparse.Namespace) -> int:
    settings = Settings()
    level = logging.DEBUG if args.verbose or settings.DEBUG else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    if args.base_url:
        settings.EMPLOYEE_SERVICE_BASE_URL = args.base_url

    logger.info("Using employee service at %s", settings.EMPLOYEE_SERVICE_BASE_URL)
    client = create_employee_client(settings)
    failures = await run_checks(client, args)

    logger.info("=" * 50)
    logger.info("Smoke run complete: %d failure(s)", failures)
    return failures


def main() -> None:
    args = parse_args()
    failures = asyncio.run(smoke(args))
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
