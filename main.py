"""
Clipper Ratings - ratings prompt engine

CLI entry point for evaluating and updating the local ratings prompt state.
"""

import argparse
import logging
import os
import sys

from clipper_ratings.models.client import ClientType
from clipper_ratings.models.session import RatingsSession
from clipper_ratings.models.stored_record import StorageKeys
from clipper_ratings.policy.bad_rating import BadRatingRecorder
from clipper_ratings.policy.client_config import ClientConfigResolver
from clipper_ratings.policy.eligibility import RatingsPromptEngine
from clipper_ratings.policy.prompt_flow import RatingsPromptFlow
from clipper_ratings.policy.versions import version_has_correct_format
from clipper_ratings.reporting.diagnostics_report import DiagnosticsReport
from clipper_ratings.utils.event_logger import LoggingEventLogger
from clipper_ratings.utils.parsing import parse_int
from clipper_ratings.utils.settings_store import JsonSettingsProvider
from clipper_ratings.utils.storage import JsonKeyValueStorage
import config.settings as settings


def setup_logging(log_level: str = "INFO", log_dir: str = "."):
    """Configure logging for the entire application."""
    os.makedirs(log_dir, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(os.path.join(log_dir, settings.LOG_FILENAME))
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Clipper Ratings - decide whether to show the ratings prompt",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Should a Chrome extension on 3.4.1 ask for a rating?
  python main.py check --client ChromeExtension --client-version 3.4.1

  # The user answered the prompt negatively
  python main.py answer no --client ChromeExtension --client-version 3.4.1

  # Bookkeeping done by the client outside the prompt
  python main.py record-clip
  python main.py seen-version --client-version 3.5.0

  # Export logged evaluations to CSV
  python main.py report
        """
    )

    parser.add_argument(
        "--data-root",
        default=str(settings.DATA_ROOT),
        help=f"Data directory (default: {settings.DATA_ROOT})"
    )

    parser.add_argument(
        "--settings-path",
        default=str(settings.SETTINGS_PATH),
        help="Path to client settings JSON"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    client_args = argparse.ArgumentParser(add_help=False)
    client_args.add_argument(
        "--client",
        required=True,
        choices=[client_type.name for client_type in ClientType],
        help="Client type asking for the decision"
    )
    client_args.add_argument(
        "--client-version",
        required=True,
        help="Running client version (X.Y.Z)"
    )

    subparsers.add_parser("check", parents=[client_args], help="Evaluate the ratings prompt")

    answer = subparsers.add_parser("answer", parents=[client_args], help="Record the user's answer")
    answer.add_argument("response", choices=["yes", "no"], help="Did the user enjoy the clipper?")

    subparsers.add_parser("record-clip", help="Count one more successful clip")

    seen = subparsers.add_parser("seen-version", help="Record the version the user last ran")
    seen.add_argument("--client-version", required=True, help="Version (X.Y.Z)")

    report = subparsers.add_parser("report", help="Export logged evaluations to CSV")
    report.add_argument(
        "--output-dir",
        default=str(settings.OUTPUT_ROOT),
        help=f"Output directory (default: {settings.OUTPUT_ROOT})"
    )

    return parser


def run(args: argparse.Namespace) -> int:
    logger = logging.getLogger(__name__)
    events_path = os.path.join(args.data_root, settings.EVENTS_FILENAME)

    if args.command == "report":
        output_path = DiagnosticsReport(events_path).generate(args.output_dir)
        print(f"Diagnostics table: {output_path}")
        return 0

    storage = JsonKeyValueStorage(args.data_root, settings.STORAGE_FILENAME)
    event_logger = LoggingEventLogger(events_path)
    resolver = ClientConfigResolver(JsonSettingsProvider.from_file(args.settings_path))
    engine = RatingsPromptEngine(storage, resolver, event_logger)
    engine.pre_cache_needed_values()

    if args.command == "record-clip":
        count = parse_int(storage.get_cached_value(StorageKeys.NUM_SUCCESSFUL_CLIPS)) or 0
        storage.set_value(StorageKeys.NUM_SUCCESSFUL_CLIPS, str(count + 1))
        print(f"Successful clips: {count + 1}")
        return 0

    if args.command == "seen-version":
        if not version_has_correct_format(args.client_version):
            logger.error(f"Version must be X.Y.Z, got {args.client_version!r}")
            return 1
        storage.set_value(StorageKeys.LAST_SEEN_VERSION, args.client_version)
        print(f"Last seen version: {args.client_version}")
        return 0

    session = RatingsSession(
        client_type=ClientType[args.client],
        client_version=args.client_version
    )
    flow = RatingsPromptFlow(engine, BadRatingRecorder(storage, event_logger), resolver)

    if args.command == "check":
        config = resolver.resolve(session.client_type)
        stage = flow.initial_stage(session)
        print(f"Client: {config.client_type.name} (ratings enabled: {config.ratings_prompt_enabled})")
        print(f"Show ratings prompt: {session.show_ratings_prompt}")
        print(f"Stage: {stage.value}")
        return 0

    if args.response == "yes":
        stage = flow.on_positive_response(session)
        next_url = resolver.get_rate_url_if_exists(session.client_type)
    else:
        stage = flow.on_negative_response(session)
        next_url = resolver.get_feedback_url_if_exists(session)

    print(f"Stage: {stage.value}")
    if next_url:
        print(f"Open: {next_url}")
    return 0


def main():
    """Main CLI entry point."""
    args = build_parser().parse_args()

    setup_logging(args.log_level, args.data_root)
    logger = logging.getLogger(__name__)

    try:
        sys.exit(run(args))

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Command {args.command} failed: {e}", exc_info=True)
        print(f"\nFailed: {e}")
        print(f"Check {settings.LOG_FILENAME} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
