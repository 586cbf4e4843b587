"""Countdowns -- one-shot, multi-shot, repeating and anonymous timers.

Demonstrates:
- Constructing a TimerRegistry and driving it with a TickDriver
- ONE_TIME, MULTI_TIME and REPEAT countdowns
- Polling the edge-triggered interval signal
- Self-removing anonymous timers via insert_timer
- Cancelling a repeating countdown

Run: python examples/countdowns.py
"""

import logging

from tick_countdown import TickDriver, TimerMode, TimerRegistry


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print("=== Countdowns ===\n")

    registry = TimerRegistry(seed=42)
    driver = TickDriver(registry, tps=10)

    def log(text: str) -> None:
        print(f"  tick {driver.tick_number:>3}  |  {text}")

    def say(text: str):
        return lambda: log(text)

    registry.start_counting(TimerMode.ONE_TIME, "build", 1.0, on_complete=say("build finished"))
    registry.start_counting(TimerMode.MULTI_TIME, "volley", 0.5, 2, on_complete=say("volley done"))
    registry.start_counting(TimerMode.REPEAT, "heartbeat", 0.75)
    registry.insert_timer(0.3, say("anonymous timer fired"))

    # Poll the per-interval signals after every tick.
    for _ in range(30):
        driver.step()
        if registry.is_one_interval_complete("volley"):
            log("volley interval")
        if registry.is_one_interval_complete("heartbeat"):
            log("heartbeat")

    registry.cancel("heartbeat")
    # Unknown id: logged as a warning, returns False.
    registry.is_one_interval_complete("heartbeat")

    print(f"\nDone at tick {driver.tick_number}. Still registered: {sorted(registry.ids())}")


if __name__ == "__main__":
    main()
