"""End-to-end timer scenarios driven through TimerRegistry and TickDriver."""
from __future__ import annotations

from tick_countdown import TickDriver, TimerIssue, TimerMode, TimerRegistry


class TestScenarios:
    def test_one_time_completes_on_third_tick(self) -> None:
        reg = TimerRegistry(seed=1)
        fired: list[int] = []
        reg.start_counting(
            TimerMode.ONE_TIME, "a", 1.0, on_complete=lambda: fired.append(1)
        )
        reg.tick(0.4)
        assert not reg.is_fully_complete("a")
        reg.tick(0.4)
        assert not reg.is_fully_complete("a")
        reg.tick(0.3)
        assert reg.is_fully_complete("a")
        assert fired == [1]

    def test_multi_time_interval_signals(self) -> None:
        reg = TimerRegistry(seed=1)
        reg.start_counting(TimerMode.MULTI_TIME, "b", 1.0, 2)
        signals = []
        for _ in range(2):
            reg.tick(1.0)
            signals.append(reg.is_one_interval_complete("b"))
        assert signals == [True, True]
        assert not reg.is_fully_complete("b")
        reg.tick(1.0)
        assert reg.is_fully_complete("b")
        assert reg.is_one_interval_complete("b") is False

    def test_anonymous_timer(self) -> None:
        reg = TimerRegistry(seed=1)
        calls: list[int] = []
        cid = reg.insert_timer(0.5, lambda: calls.append(1))
        reg.tick(0.5)
        assert calls == [1]
        assert cid not in reg

    def test_invalid_construction_never_completes(self) -> None:
        reg = TimerRegistry(seed=1)
        issues: list[tuple[TimerIssue, str]] = []
        reg.on_issue(lambda issue, cid: issues.append((issue, cid)))
        reg.start_counting(TimerMode.MULTI_TIME, "c", 1.0)
        for _ in range(10):
            reg.tick(0.5)
            assert reg.is_fully_complete("c") is False
            assert reg.is_one_interval_complete("c") is False
        assert len(issues) == 21
        assert {issue for issue, _ in issues} == {TimerIssue.INVALID_CONFIGURATION}


class TestDrivenByClock:
    def test_mixed_timers_at_fixed_rate(self) -> None:
        """At 4 tps (dt=0.25) timers complete on predictable ticks."""
        reg = TimerRegistry(seed=1)
        driver = TickDriver(reg, tps=4)
        fired: list[tuple[int, str]] = []

        def record(name: str):
            return lambda: fired.append((driver.tick_number, name))

        reg.start_counting(TimerMode.ONE_TIME, "one", 1.0, on_complete=record("one"))
        reg.start_counting(
            TimerMode.MULTI_TIME, "multi", 0.5, 2, on_complete=record("multi")
        )
        reg.insert_timer(0.75, record("anon"))
        reg.start_counting(TimerMode.REPEAT, "rep", 0.5)

        driver.run(12)

        assert sorted(fired) == [(3, "anon"), (4, "one"), (6, "multi")]
        assert sorted(reg.ids()) == ["multi", "one", "rep"]
        assert reg.get("rep").completed_repetitions == 4  # type: ignore[union-attr]

    def test_timer_can_stop_driver(self) -> None:
        reg = TimerRegistry(seed=1)
        driver = TickDriver(reg, tps=8)
        reg.insert_timer(0.5, driver.request_stop)
        driver.run(100)
        assert driver.tick_number == 4
