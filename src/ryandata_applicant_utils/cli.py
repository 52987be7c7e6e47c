from __future__ import annotations

import logging
from typing import Optional

import typer

from ryandata_applicant_utils.lookup import get_lookup_client
from ryandata_applicant_utils.models import Failure, JobApplicant, Name, Success
from ryandata_applicant_utils.service import ApplicantService
from ryandata_applicant_utils.validation import validate_ssn

app = typer.Typer(help="Validate job applicants and resolve ZIP codes to city and state.")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(  # noqa: B008
        False,
        "--verbose",
        "-v",
        help="Show debug logging from the lookup client.",
    ),
) -> None:
    """Applicant validation tools."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command("validate-ssn")
def validate_ssn_command(
    ssn: str = typer.Argument(..., help="SSN as DDD-DD-DDDD or nine digits."),  # noqa: B008
) -> None:
    """Check an SSN against the issuance rules."""
    outcome = validate_ssn(ssn)
    typer.echo(str(outcome))
    raise typer.Exit(code=0 if outcome.is_valid else 1)


@app.command("validate-name")
def validate_name_command(
    first: str = typer.Argument(..., help="First name."),  # noqa: B008
    last: str = typer.Argument(..., help="Last name."),  # noqa: B008
    middle: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--middle",
        "-m",
        help="Middle name.",
    ),
) -> None:
    """Check that a name has both a first and a last name."""
    name = Name.of(first, middle, last)
    outcome = name.validate_name()
    typer.echo(str(outcome))
    if outcome.is_valid:
        typer.echo(f"Full name: {name.full_name()}")
        typer.echo(f"Display name: {name.display_name()}")
    raise typer.Exit(code=0 if outcome.is_valid else 1)


@app.command()
def lookup(
    zip_codes: list[str] = typer.Argument(..., help="One or more ZIP codes."),  # noqa: B008
    timeout: Optional[float] = typer.Option(  # noqa: B008
        None,
        "--timeout",
        help="Request timeout in seconds.",
    ),
) -> None:
    """Resolve ZIP codes to city and state, concurrently, in input order."""
    client = get_lookup_client(timeout=timeout)
    results = client.lookup_many(zip_codes)

    failed = 0
    for zip_code, result in zip(zip_codes, results):
        match result:
            case Success(value=city_state):
                typer.echo(f"{zip_code}: {city_state.display_format()}")
            case Failure(message=message):
                failed += 1
                typer.echo(f"{zip_code}: lookup failed ({message})")

    if failed:
        raise typer.Exit(code=1)


@app.command()
def add(
    first: str = typer.Option("", "--first", help="First name."),  # noqa: B008
    middle: str = typer.Option("", "--middle", help="Middle name."),  # noqa: B008
    last: str = typer.Option("", "--last", help="Last name."),  # noqa: B008
    ssn: str = typer.Option("", "--ssn", help="SSN as DDD-DD-DDDD or nine digits."),  # noqa: B008
    zip_code: str = typer.Option("", "--zip", help="ZIP code (12345 or 12345-6789)."),  # noqa: B008
    resolve: bool = typer.Option(  # noqa: B008
        True,
        "--lookup/--no-lookup",
        help="Resolve the ZIP code to city and state.",
    ),
) -> None:
    """Validate a job applicant and print the formatted record."""
    applicant = JobApplicant.create(first, middle, last, ssn, zip_code)

    service = ApplicantService(lookup_client=get_lookup_client() if resolve else None)
    result = service.process_applicant(applicant, resolve=resolve)

    if not result.is_valid:
        typer.echo("Applicant is invalid:")
        for message in result.error_messages:
            typer.echo(f"  - {message}")
        raise typer.Exit(code=1)

    typer.echo(f"Name: {applicant.name.last_name_first()}")
    typer.echo(f"SSN: {applicant.formatted_ssn()}")
    if result.address is not None:
        typer.echo(f"Address: {result.address.display_format()}")
    else:
        typer.echo(f"ZIP code: {applicant.zip_code}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
