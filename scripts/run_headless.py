# scripts/run_headless.py
import argparse

from dopareserve.core.activities import UnknownActivity, activity_ids, definition
from dopareserve.core.config import MINUTES_PER_DAY
from dopareserve.sim.scheduler import TickScheduler
from dopareserve.sim.simulation import ActivityController, ReserveSimulation, SimulationState


def build_parser():
    p = argparse.ArgumentParser(description="Run the reserve model without a window.")
    p.add_argument("--minutes", type=int, default=MINUTES_PER_DAY, help="simulated minutes (ticks) to run")
    p.add_argument("--every", type=int, default=60, help="print one sample every N ticks")
    p.add_argument(
        "--at",
        action="append",
        default=[],
        metavar="MINUTE:ACTIVITY",
        help=f"switch an activity on at a minute, e.g. 120:work (known: {', '.join(activity_ids())})",
    )
    return p


def parse_plan(items):
    """'MINUTE:ACTIVITY' strings -> {minute: [activity, ...]}; raises ValueError on bad entries."""
    plan = {}
    for item in items:
        minute, sep, activity = item.partition(":")
        if not sep:
            raise ValueError(f"--at {item!r}: expected MINUTE:ACTIVITY")
        try:
            at = int(minute)
        except ValueError:
            raise ValueError(f"--at {item!r}: minute must be an integer") from None
        if at < 0:
            raise ValueError(f"--at {item!r}: minute must not be negative")
        try:
            definition(activity)
        except UnknownActivity:
            raise ValueError(
                f"--at {item!r}: unknown activity {activity!r} (known: {', '.join(activity_ids())})"
            ) from None
        plan.setdefault(at, []).append(activity)
    return plan


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    try:
        plan = parse_plan(args.at)
    except ValueError as e:
        p.error(str(e))

    state = SimulationState.create()
    scheduler = TickScheduler(state.config.speed)
    controller = ActivityController(state, scheduler)
    sim = ReserveSimulation(state)

    try:
        for minute in range(args.minutes):
            for activity in plan.get(minute, ()):
                if not controller.toggle(activity, True):
                    print(f"[Dopareserve] {minute:5d} could not start {activity} (reserve {state.reserve:.1f}%)")

            s = sim.tick()
            scheduler.advance()

            if minute % max(1, args.every) == 0:
                active = ",".join(s.activities) or "-"
                print(f"{s.sequence_index:6d} {s.clock_label}  reserve={s.reserve_percent:6.2f}%  "
                      f"use={s.consumption:.3f}  active={active}")
    finally:
        state.dispose()
        print("Stopped.")


if __name__ == "__main__":
    main()
