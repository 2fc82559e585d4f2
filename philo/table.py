"""The dining table: forks, philosophers and the monitor that watches them."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from .params import Params
from .timing import now_ms, sleep_ms

RESET = "\033[0m"
RED = "\033[1;31m"
GREEN = "\033[1;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[1;34m"
MAGENTA = "\033[1;35m"

TAKEN_FORK = f"{BLUE}has taken a fork{RESET}"
EATING = f"{GREEN}is eating{RESET}"
SLEEPING = f"{YELLOW}is sleeping{RESET}"
THINKING = f"{MAGENTA}is thinking{RESET}"

_THINK_MS = 10
_MONITOR_INTERVAL_MS = 5


@dataclass
class Fork:
    """A fork shared between two neighbours."""

    used: bool = False
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


class Philosopher:
    """One diner, holding a right fork and a left fork."""

    def __init__(self, table: Table, pos: int, right: Fork, left: Fork):
        self.table = table
        self.pos = pos
        self.right = right
        self.left = left
        self.taken = {"l": False, "r": False}
        self.last_meal = 0
        self.meal_count = 0
        self.meal_lock = threading.Lock()

    def _fork(self, side: str) -> Fork:
        if side == "l":
            return self.left
        if side == "r":
            return self.right
        raise ValueError(f"unknown fork side: {side!r}")

    def take_fork(self, side: str) -> None:
        """Try to pick up the fork on ``side`` ("l" or "r") if it is free."""
        fork = self._fork(side)
        if self.table.is_dead():
            return
        with fork.lock:
            if self.taken[side] or fork.used:
                return
            self.taken[side] = True
            fork.used = True
        self.table.write_state(self, TAKEN_FORK)

    def release_fork(self, side: str) -> None:
        """Put down the fork on ``side``."""
        fork = self._fork(side)
        with fork.lock:
            self.taken[side] = False
            fork.used = False

    def release_forks_and_sleep(self) -> None:
        self.release_fork("r")
        self.release_fork("l")
        self.table.write_state(self, SLEEPING)
        sleep_ms(self.table.params.time_to_sleep)

    def eat(self) -> None:
        """Eat, record the meal, then put the forks down and sleep."""
        self.table.write_state(self, EATING)
        sleep_ms(self.table.params.time_to_eat)
        with self.meal_lock:
            self.meal_count += 1
            self.last_meal = now_ms() - self.table.start_time
        self.release_forks_and_sleep()

    def think(self) -> None:
        self.table.write_state(self, THINKING)
        sleep_ms(_THINK_MS)

    def live(self) -> None:
        """Run the philosopher's loop until the simulation stops."""
        params = self.table.params
        if self.pos % 2 != 0:
            sleep_ms(params.time_to_eat + (self.pos * 5) % 10)
        while not self.table.is_dead():
            if params.meal_max > 0 and self.meal_count >= params.meal_max:
                break
            self.take_fork("l")
            if self.taken["l"]:
                self.take_fork("r")
            if self.taken["r"] and self.taken["l"]:
                self.eat()
                self.think()
            else:
                time.sleep(0)


class Table:
    """Shared state of one simulation and the means to run it."""

    def __init__(self, params: Params, out: TextIO):
        self.params = params
        self.out = out
        self.start_time = now_ms()
        self._dead = False
        self._dead_lock = threading.Lock()
        self._console_lock = threading.Lock()
        self.forks = [Fork() for _ in range(params.num)]
        self.philosophers = [
            Philosopher(
                self, pos, self.forks[pos], self.forks[(pos + 1) % params.num]
            )
            for pos in range(params.num)
        ]

    def is_dead(self) -> bool:
        """Tell whether the simulation has been stopped."""
        with self._dead_lock:
            return self._dead

    def stop(self) -> None:
        with self._dead_lock:
            self._dead = True

    def write_state(self, philosopher: Philosopher, message: str) -> None:
        """Print a timestamped state line unless the simulation has stopped."""
        elapsed = now_ms() - self.start_time
        with self._console_lock:
            if not self.is_dead():
                self.out.write(f"{elapsed:03d} {philosopher.pos} {message}\n")
                self.out.flush()

    def check_death(self, philosopher: Philosopher, now: int) -> bool:
        """Stop and announce if ``philosopher`` has starved at time ``now``."""
        with philosopher.meal_lock:
            since_meal = now - philosopher.last_meal
        if since_meal <= self.params.time_to_die:
            return False
        with self._console_lock:
            self.stop()
            self.out.write(f"{RED}{now:03d} {philosopher.pos} died\n{RESET}")
            self.out.flush()
        return True

    def all_have_eaten(self) -> bool:
        """Tell whether every philosopher has reached the meal limit."""
        meal_max = self.params.meal_max
        finished = True
        for philosopher in self.philosophers:
            with philosopher.meal_lock:
                if meal_max > 0 and philosopher.meal_count < meal_max:
                    finished = False
        return finished

    def monitor(self) -> None:
        """Watch for starvation or completion, then stop the simulation."""
        while True:
            now = now_ms() - self.start_time
            if any(self.check_death(p, now) for p in self.philosophers):
                return
            if self.params.meal_max > 0 and self.all_have_eaten():
                self.stop()
                return
            sleep_ms(_MONITOR_INTERVAL_MS)

    def run(self) -> None:
        """Start every philosopher and the monitor, and wait for them all."""
        self.start_time = now_ms()
        threads = [
            threading.Thread(target=p.live, name=f"philosopher-{p.pos}")
            for p in self.philosophers
        ]
        threads.append(threading.Thread(target=self.monitor, name="monitor"))
        started = []
        try:
            for thread in threads:
                thread.start()
                started.append(thread)
        except RuntimeError:
            self.stop()
            raise
        finally:
            for thread in started:
                thread.join()