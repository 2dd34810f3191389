import argparse
import json
import logging
from datetime import datetime

from voicetask.config import settings


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_now(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO 8601 datetime: {value!r}") from None


def parse_command(text: str, now: datetime | None = None) -> None:
    from voicetask.services.parser import parse_transcript

    result = parse_transcript(text, now=now)
    print(json.dumps(result.to_dict(), indent=2))


def check_config() -> None:
    print("voicetask Configuration Check\n")
    print(f"  Log level: {settings.log_level}")
    print(f"  Default priority: {settings.default_priority.value}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Turn spoken task descriptions into tasks")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    parse_parser = subparsers.add_parser("parse", help="Parse a transcript into task fields")
    parse_parser.add_argument("text", help="Transcript text")
    parse_parser.add_argument(
        "--now",
        type=parse_now,
        default=None,
        help="Reference time for relative dates (ISO 8601, defaults to the local clock)",
    )
    subparsers.add_parser("check", help="Check configuration")

    args = parser.parse_args(argv)

    setup_logging()

    if args.command == "parse":
        parse_command(args.text, now=args.now)
    elif args.command == "check":
        check_config()
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
