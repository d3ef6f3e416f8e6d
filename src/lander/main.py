"""
Entrypoint: drive the lander supervisor through its phases.

Usage:
    python -m lander.main
    python -m lander.main --steps 4 --event-log logs/notifications.jsonl
    python -m lander.main --fail-action cut_off_engines --failure-policy abort
"""

from __future__ import annotations

import argparse
import logging
import sys

from lander.actions.placeholders import ACTION_NAMES
from lander.config import LanderConfig, load_config
from lander.supervisor import (
    Controller,
    JsonlListener,
    LoggingListener,
    PhaseActionError,
    PhaseOutcome,
    RecordingListener,
    get_controller,
    teardown_controller,
)
from lander.supervisor.registry import PHASE_IDENTIFIERS
from lander.utils.logging import setup_logging

logger = logging.getLogger(__name__)

UNHANDLED_FAILURE_MESSAGE = "An exception occurred in the state machine."


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments. Unset options fall back to LANDER_* env vars."""
    p = argparse.ArgumentParser(
        description="Lunar lander mission-phase supervisor: orbit -> descending -> engine-cutoff -> landed",
    )
    p.add_argument("--steps", type=int, default=None, help="Number of advance() calls (default 3)")
    p.add_argument("--initial-phase", choices=PHASE_IDENTIFIERS, default=None,
                   help="Phase to start in (default orbit)")
    p.add_argument("--failure-policy", choices=["continue", "abort"], default=None,
                   help="What a failed phase action does: continue (notify, stay) or abort (notify, stop)")
    p.add_argument("--event-log", type=str, default=None,
                   help="Append notifications to this JSONL file")
    p.add_argument("--action-log", type=str, default=None,
                   help="Append placeholder action calls to this JSONL file")
    p.add_argument("--fail-action", action="append", choices=ACTION_NAMES, dest="fail_actions",
                   default=None, help="Make this placeholder action fail (repeatable)")
    p.add_argument("--log-level", type=str, default=None, help="Log level (default INFO)")
    return p.parse_args(argv)


def run_mission(controller: Controller, steps: int) -> list[PhaseOutcome]:
    """
    Call advance() steps times. Anything escaping the phases is logged and
    reported to listeners; it never propagates to the caller. An aborted
    phase's outcome is kept as the last entry.
    """
    outcomes: list[PhaseOutcome] = []
    try:
        for _ in range(steps):
            outcomes.append(controller.advance())
    except PhaseActionError as e:
        outcomes.append(e.outcome)
        logger.error("Mission aborted: %s", e)
        controller.notify(UNHANDLED_FAILURE_MESSAGE)
    except Exception as e:
        logger.exception("An exception occurred: %s", e)
        controller.notify(UNHANDLED_FAILURE_MESSAGE)
    return outcomes


def main(argv: list[str] | None = None) -> int:
    """Run the mission. Returns 0 even when the mission hit a failure."""
    args = parse_args(argv)
    config: LanderConfig = load_config(
        log_level=args.log_level,
        initial_phase=args.initial_phase,
        steps=args.steps,
        failure_policy=args.failure_policy,
        event_log_path=args.event_log,
        action_log_path=args.action_log,
        fail_actions=args.fail_actions,
    )
    setup_logging(config.log_level)

    controller = get_controller(config)
    recorder = RecordingListener()
    controller.attach(LoggingListener())
    controller.attach(recorder)
    if config.event_log_path:
        controller.attach(JsonlListener(config.event_log_path))

    try:
        outcomes = run_mission(controller, config.steps)
        final_phase = controller.phase.name
    finally:
        teardown_controller()

    print()
    print(f"Final phase: {final_phase}")
    print(f"Advances: {len(outcomes)}/{config.steps}  failed: {sum(1 for o in outcomes if not o.ok)}")
    print("Notifications:")
    for msg in recorder.messages:
        print(f"  - {msg}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
