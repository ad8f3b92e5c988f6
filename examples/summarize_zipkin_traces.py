"""
Poll Zipkin for recent traces and print a GenAI trace summary.

Configuration is read from the environment or a .env file (see README);
command-line options override it.

Usage:
    python examples/summarize_zipkin_traces.py --service my-agent --since-minutes 5
"""

import argparse
import json
import logging
import sys
import time

from gen_ai_trace_harness import (
    HarnessConfig,
    TraceHarness,
    TracePollTimeoutError,
    TraceValidationError,
    format_summary,
    format_trace_dump,
)

logging.getLogger("urllib3").setLevel(logging.WARNING)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Summarize GenAI traces recorded in Zipkin.")
    parser.add_argument("--zipkin-url", default=None, help="Zipkin base URL (default: $ZIPKIN_BASE_URL)")
    parser.add_argument("--service", default=None, help="Restrict to a service name")
    parser.add_argument("--since-minutes", type=float, default=None, help="Only consider traces from the last N minutes")
    parser.add_argument("--timeout", type=float, default=None, help="Seconds to wait for traces to arrive")
    parser.add_argument("--interval", type=float, default=None, help="Seconds between polls")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON instead of a report")
    parser.add_argument("--dump", action="store_true", help="Also print every span with its tags")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    config = HarnessConfig.from_env()
    if args.zipkin_url:
        config.zipkin_base_url = args.zipkin_url
    if args.service:
        config.service_name = args.service
    if args.timeout is not None:
        config.poll_timeout_seconds = args.timeout
    if args.interval is not None:
        config.poll_interval_seconds = args.interval

    since = time.time() - args.since_minutes * 60 if args.since_minutes else None

    with TraceHarness.from_config(config) as harness:
        try:
            traces = harness.await_traces(since=since)
        except TracePollTimeoutError as e:
            logger.error(str(e))
            return 1

        summary = harness.builder.build(traces)

        if args.dump:
            print(format_trace_dump(traces))
        if args.json:
            print(json.dumps(summary.model_dump(), indent=2))
        else:
            print(format_summary(summary))

        try:
            harness.validate(traces)
        except TraceValidationError as e:
            logger.error(f"Trace validation failed: {e}")
            return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
