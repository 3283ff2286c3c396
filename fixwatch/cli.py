"""Command-line entrypoint: check which deployed fixes have been published."""

from __future__ import annotations

import argparse
import asyncio
import sys

from fixwatch.config import Credentials
from fixwatch.errors import ConfigurationError, FixwatchError, MissingCredentialError
from fixwatch.helix import HelixAdminClient, HelixAdminConfig
from fixwatch.logging import (
    configure_logging,
    get_logger,
    log_exception,
    log_warning,
    resolve_log_level,
)
from fixwatch.spacecat import SpaceCatClient, SpaceCatConfig
from fixwatch.verification import (
    DEFAULT_DELAY_S,
    PublicationVerifier,
    VerificationResult,
    VerificationTarget,
    VerifierDependencies,
    encode_summary_json,
    render_summary,
    render_summary_arrays,
)

logger = get_logger(__name__)


async def run_verification(
    credentials: Credentials, target: VerificationTarget
) -> VerificationResult:
    """Verify a target against the live tracking and admin services."""
    sites = SpaceCatClient(SpaceCatConfig.from_credentials(credentials))
    status = HelixAdminClient(HelixAdminConfig.from_credentials(credentials))
    try:
        verifier = PublicationVerifier(
            VerifierDependencies(sites=sites, status=status)
        )
        return await verifier.verify(target)
    finally:
        await sites.aclose()
        await status.aclose()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fixwatch", description=__doc__)
    parser.add_argument(
        "--site-id",
        default=None,
        help="Tracking service site id (default: $FIXWATCH_SITE_ID)",
    )
    parser.add_argument(
        "--opportunity-id",
        default=None,
        help="Tracking service opportunity id (default: $FIXWATCH_OPPORTUNITY_ID)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_DELAY_S,
        help="Seconds to pause between status lookups",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of the text summary",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: $FIXWATCH_LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a verification and print its summary.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on completion (including when no fix qualifies), 1 when
        credentials or identifiers are missing or a fatal fetch fails.

    """
    args = _build_parser().parse_args(argv)

    log_level = resolve_log_level(args.log_level)
    normalized_level, invalid_level = configure_logging(log_level, force=True)
    if invalid_level:
        log_warning(
            logger,
            "Invalid log level %r, falling back to %s",
            log_level,
            normalized_level,
        )

    try:
        credentials = Credentials.from_env()
        target = VerificationTarget.resolve(
            site_id=args.site_id,
            opportunity_id=args.opportunity_id,
            delay_s=args.delay,
        )
    except (MissingCredentialError, ConfigurationError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        result = asyncio.run(run_verification(credentials, target))
    except FixwatchError as exc:
        log_exception(logger, "Verification failed", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(encode_summary_json(result))
        return 0

    print(render_summary(result))
    print(render_summary_arrays(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
