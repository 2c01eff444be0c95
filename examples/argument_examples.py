import logging
from enum import Enum
from pathlib import Path

from argkit import ArgumentParser, setup_logging
from argkit.parser.utils import convert_each, enum_converter


class Place(Enum):
    """Enum for different places."""

    NEW_YORK = "New York"
    SAN_FRANCISCO = "San Francisco"
    LONDON = "London"

    def __str__(self):
        return self.value


def deploy(
    service: str,
    place: Place = Place.NEW_YORK,
    region: str = "us-east-1",
    path: Path | None = None,
    tag: list[str] | None = None,
    verbose: int = 0,
    numbers: list[int] | None = None,
    dry_run: bool = False,
) -> str:
    numbers = numbers or []
    tags = ",".join(tag or [])
    if verbose:
        print(f"Deploying {service}[{tags}] to {region} at {place} from {path}...")
    prefix = "(dry run) " if dry_run else ""
    return (
        f"{prefix}{service}:{tags}:{'|'.join(str(number) for number in numbers)} "
        f"deployed to {region} at {place}."
    )


parser = ArgumentParser(
    prog="argument_examples.py",
    description="Deploy a service.",
    epilog="Example: argument_examples.py web LONDON --tag beta -vv",
)
parser.add_argument(
    "service",
    choices=["web", "database", "cache"],
    help="Service name to deploy.",
)
parser.add_argument(
    "place",
    nargs="?",
    convert=enum_converter(Place),
    const=Place.NEW_YORK,
    help="Place where the service will be deployed.",
)
parser.add_argument(
    "--region",
    default="us-east-1",
    choices=["us-east-1", "us-west-2", "eu-west-1"],
    help="Deployment region.",
)
parser.add_argument(
    "-p",
    "--path",
    convert=Path,
    help="Path to the configuration file.",
)
parser.add_argument(
    "-t",
    "--tag",
    action="append",
    help="Tag for the deployment. Repeatable.",
)
parser.add_argument(
    "--numbers",
    nargs="*",
    convert=convert_each(int),
    default=[1, 2, 3],
    help="Optional numbers.",
)
parser.add_argument("-v", "--verbose", action="count", help="More output.")
parser.add_argument("-n", "--dry-run", action="store_true", help="Do nothing.")
parser.add_argument("-V", "--version", action="version", version="deploy 1.0")

if __name__ == "__main__":
    setup_logging(mode="cli", console_log_level=logging.WARNING)
    args = parser.parse_or_exit()
    print(
        deploy(
            args["service"],
            place=args["place"] or Place.NEW_YORK,
            region=args["region"],
            path=args["path"],
            tag=args["tag"],
            verbose=args["verbose"],
            numbers=args["numbers"],
            dry_run=args["dry-run"],
        )
    )
