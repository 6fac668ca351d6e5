"""Command line entry point: python -m google_geocoding."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import requests

from .client import GeocodingClient
from .codes import describe_accuracy
from .config import ClientConfig
from .errors import GeocodingError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="google-geocoding",
        description="Forward and reverse geocoding with the Google Maps geo service",
    )
    parser.add_argument("--key", help="Google Maps API key (default: $GOOGLE_GEOCODING_KEY)")
    parser.add_argument("--country", help="ccTLD country code used to bias results")
    parser.add_argument("--sensor", action="store_true", help="Request comes from a device with a location sensor")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds (default: 60)")
    parser.add_argument("--user-agent", help="Text appended to the client's user agent")
    parser.add_argument(
        "--viewport",
        type=float,
        nargs=4,
        metavar=("CENTER_LNG", "CENTER_LAT", "SPAN_LNG", "SPAN_LAT"),
        help="Viewport used to bias results",
    )
    parser.add_argument("--check-status", action="store_true", help="Fail on an error status inside the response body")
    parser.add_argument("--verbose", action="store_true", help="Log requests to stderr")

    sub = parser.add_subparsers(dest="command", required=True)

    info = sub.add_parser("info", help="All geo information of an address")
    info.add_argument("address", nargs="+", help="Address, or address fragments joined with commas")

    lnglat = sub.add_parser("lnglat", help="Longitude, latitude and accuracy of an address")
    lnglat.add_argument("address", nargs="+", help="Address, or address fragments joined with commas")

    for name, text in (
        ("reverse", "Most specific placemark of a location"),
        ("reverse-all", "All placemarks of a location, most specific first"),
    ):
        reverse = sub.add_parser(name, help=text)
        reverse.add_argument("lng", type=float, help="Longitude")
        reverse.add_argument("lat", type=float, help="Latitude")

    accuracy = sub.add_parser("accuracy", help="Describe an accuracy level")
    accuracy.add_argument("level", help="Accuracy level (1-9)")

    return parser


def build_client(args: argparse.Namespace) -> GeocodingClient:
    """Environment settings overridden by command line options."""
    config = ClientConfig.from_env()
    if args.key is not None:
        config.api_key = args.key
    if args.country is not None:
        config.country = args.country
    if args.sensor:
        config.sensor = True
    if args.timeout is not None:
        config.timeout = args.timeout
    if args.user_agent is not None:
        config.user_agent = args.user_agent
    if args.check_status:
        config.check_response_status = True

    client = GeocodingClient(config=config, logger=logger.info)
    if args.viewport:
        client.set_viewport(*args.viewport)
    return client


def run(args: argparse.Namespace):
    if args.command == "accuracy":
        return describe_accuracy(args.level)

    client = build_client(args)
    if args.command == "info":
        return client.geocode_info(args.address).to_dict()
    if args.command == "lnglat":
        return client.geocode_lnglat(args.address).to_dict()
    if args.command == "reverse":
        return client.reverse_geocode(args.lng, args.lat).to_dict()
    return [placemark.to_dict() for placemark in client.reverse_geocode_all(args.lng, args.lat)]


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        result = run(args)
    except (GeocodingError, requests.RequestException) as e:
        logger.debug("Geocoding failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
