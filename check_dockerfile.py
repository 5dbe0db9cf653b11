#!/usr/bin/env python3
import argparse
import os
import sys

from uptag.models import UpdateLevel
from uptag.services.dockerfile_check_service import DockerfileCheckService
from uptag.utils.config import Settings
from uptag.utils.formatting import format_image_failures, format_image_successes
from uptag.utils.logging import setup_logger


def main():
    parser = argparse.ArgumentParser(description="Check the images of a Dockerfile for newer tags")
    parser.add_argument('-i', '--input', default=os.environ.get("DOCKERFILE", "Dockerfile"), help='Path of the Dockerfile to check')
    parser.add_argument('--search-limit', type=int, help='Number of newest tags to search for the current tag')
    args = parser.parse_args()
    logger = setup_logger("DockerfileCheck")

    try:
        settings = Settings.from_env(search_limit=args.search_limit)
        logger.info(f"Starting update check of {args.input}")
        report = DockerfileCheckService(args.input, settings).run()
    except Exception as e:
        logger.error(f"Update check of {args.input} failed: {e}")
        return int(UpdateLevel.FAILURE)

    successes = format_image_successes(report)
    if successes:
        print(successes)
    if report.failures:
        print(format_image_failures(report), file=sys.stderr)
    return int(report.update_level())


if __name__ == "__main__":
    sys.exit(main())
