"""Philosophers sharing forks around a table, watched by a monitor."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from dinesim.config import Settings
from dinesim.timing import current_time_ms, precise_sleep

_MONITOR_INTERVAL = 0.001


class Philosopher:
    """One diner: eats with two neighbouring forks, sleeps, thinks."""

    def __init__(self, ident: int, table: Table) -> None:
        self.id = ident
        self.table = table
        self.meals_eaten = 0
        self.last_meal_time = table.start_time
        self.meal_lock = threading.Lock()
        self.thread: threading.Thread | None = None

    @property
    def left(self) -> int:
        return self.id - 1

    @property
    def right(self) -> int:
        return self.id % self.table.settings.philosophers

    def take_forks(self) -> None:
        """Pick up both forks; even seats reach right first to avoid deadlock."""
        order = (self.right, self.left) if self.id % 2 == 0 else (self.left, self.right)
        for index in order:
            self.table.forks[index].acquire()
            self.table.print_status(self, "has taken a fork")

    def release_forks(self) -> None:
        self.table.forks[self.left].release()
        self.table.forks[self.right].release()

    def eat(self) -> None:
        settings = self.table.settings
        self.take_forks()
        try:
            with self.meal_lock:
                self.last_meal_time = current_time_ms()
                self.meals_eaten += 1
            self.table.print_status(self, "is eating")
            precise_sleep(settings.time_to_eat)
        finally:
            self.release_forks()
        if settings.must_eat is not None and settings.must_eat > 0:
            self.table.check_all_done()

    def sleep(self) -> None:
        self.table.print_status(self, "is sleeping")
        precise_sleep(self.table.settings.time_to_sleep)

    def think(self) -> None:
        self.table.print_status(self, "is thinking")

    def routine(self) -> None:
        """Cycle through eating, sleeping and thinking until the table stops."""
        table = self.table
        if self.id % 2 == 0:
            precise_sleep(table.settings.time_to_eat // 2)
        while not table.check_stop():
            self.eat()
            if table.check_stop():
                break
            self.sleep()
            if table.check_stop():
                break
            self.think()


class Table:
    """Shared state of one simulation: forks, stop flag and output."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.start_time = current_time_ms()
        self._stop = False
        self._stop_lock = threading.Lock()
        self._print_lock = threading.Lock()
        self.forks = [threading.Lock() for _ in range(settings.philosophers)]
        self.philosophers = [
            Philosopher(ident, self) for ident in range(1, settings.philosophers + 1)
        ]

    def check_stop(self) -> bool:
        with self._stop_lock:
            return self._stop

    def set_stop(self) -> None:
        with self._stop_lock:
            self._stop = True

    def print_status(self, philosopher: Philosopher, action: str) -> None:
        """Write a timestamped status line unless the simulation has stopped."""
        with self._print_lock:
            if not self.check_stop():
                elapsed = current_time_ms() - self.start_time
                self.out.write(f"{elapsed} {philosopher.id} {action}\n")

    def check_all_done(self) -> None:
        """Stop the simulation once every philosopher has eaten enough."""
        target = self.settings.must_eat
        if target is None:
            return
        done = True
        for philosopher in self.philosophers:
            with philosopher.meal_lock:
                if philosopher.meals_eaten < target:
                    done = False
        if done:
            self.set_stop()

    def monitor(self) -> Philosopher | None:
        """Watch for starvation; return the philosopher who died, if any."""
        while not self.check_stop():
            for philosopher in self.philosophers:
                with philosopher.meal_lock:
                    starving = (
                        current_time_ms() - philosopher.last_meal_time
                        > self.settings.time_to_die
                    )
                if starving:
                    self.print_status(philosopher, "died")
                    self.set_stop()
                    return philosopher
            time.sleep(_MONITOR_INTERVAL)
        return None

    def run(self) -> Philosopher | None:
        """Run the simulation to its end; return the philosopher who died, if any."""
        if self.settings.philosophers == 1:
            run_single(self.settings, self.out)
            self.set_stop()
            return self.philosophers[0]
        for philosopher in self.philosophers:
            philosopher.thread = threading.Thread(
                target=philosopher.routine, name=f"philosopher-{philosopher.id}"
            )
            philosopher.thread.start()
        victim = self.monitor()
        for philosopher in self.philosophers:
            philosopher.thread.join()
        return victim


def run_single(settings: Settings, out: TextIO) -> None:
    """A lone philosopher holds one fork and starves after ``time_to_die``."""
    out.write("0 1 has taken a fork\n")
    time.sleep(settings.time_to_die / 1000)
    out.write(f"{settings.time_to_die} 1 died\n")