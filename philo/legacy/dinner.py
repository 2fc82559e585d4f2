"""A dinner where every philosopher is watched by a short-lived timer thread."""

from __future__ import annotations

import threading
from typing import TextIO

from ..table import BLUE, GREEN, MAGENTA, RED, RESET, YELLOW
from ..timing import now_ms, sleep_ms
from .parsing import Settings

TAKEN_FORK = f"{BLUE} has taken a fork\n{RESET}"
EATING = f"{GREEN} is eating\n{RESET}"
SLEEPING = f"{YELLOW} is sleeping\n{RESET}"
THINKING = f"{MAGENTA} is thinking\n{RESET}"
DIED = f"{RED} died\n{RESET}"

_INT_MAX = 2**31 - 1


class Seat:
    """One philosopher: owns a left fork and borrows the neighbour's as right."""

    def __init__(self, dinner: Dinner, n: int):
        self.dinner = dinner
        self.n = n
        self.meal_count = 0
        self.last_eat = 0
        self.fork_left = threading.Lock()
        self.fork_right = self.fork_left

    def take_forks(self) -> None:
        """Pick up the left fork, then the right one (blocking on each)."""
        dinner = self.dinner
        settings = dinner.settings
        self.fork_left.acquire()
        dinner.print(self, TAKEN_FORK)
        if settings.philo_nbr == 1:
            sleep_ms(settings.time_to_die * 2)
            self.fork_left.release()
            return
        self.fork_right.acquire()
        dinner.print(self, TAKEN_FORK)

    def eat(self) -> None:
        """Eat, put both forks down, sleep, then start thinking."""
        dinner = self.dinner
        settings = dinner.settings
        dinner.print(self, EATING)
        with dinner.eat_lock:
            self.last_eat = now_ms()
            self.meal_count += 1
        sleep_ms(settings.time_to_eat)
        if settings.philo_nbr > 1:
            self.fork_right.release()
            self.fork_left.release()
        dinner.print(self, SLEEPING)
        sleep_ms(settings.time_to_sleep)
        dinner.print(self, THINKING)

    def watch(self) -> None:
        """Wait one dying period and stop the dinner if this seat starved."""
        dinner = self.dinner
        time_to_die = dinner.settings.time_to_die
        sleep_ms(time_to_die + 1)
        if dinner.is_stopped():
            return
        with dinner.eat_lock, dinner.stop_lock:
            starved = (
                not dinner.is_stopped() and now_ms() - self.last_eat >= time_to_die
            )
        if starved:
            dinner.print(self, DIED)
            dinner.stop()

    def live(self) -> None:
        """Run the philosopher's loop until the dinner stops or meals run out."""
        dinner = self.dinner
        settings = dinner.settings
        if self.n % 2 == 0:
            sleep_ms(settings.time_to_eat // 10)
        while not dinner.is_stopped():
            watcher = threading.Thread(target=self.watch, name=f"watch-{self.n}")
            watcher.start()
            try:
                self.take_forks()
                self.eat()
                if dinner.is_stopped():
                    return
            finally:
                watcher.join()
            if self.meal_count == settings.limit_meals:
                dinner.finish_meals()
                return


class Dinner:
    """Shared state of one dinner and the means to run it."""

    def __init__(self, settings: Settings, out: TextIO):
        self.settings = settings
        self.out = out
        self.t_start = now_ms()
        self.finished = 0
        self._stop = False
        self._dead_lock = threading.Lock()
        self._print_lock = threading.Lock()
        self.stop_lock = threading.Lock()
        self.eat_lock = threading.Lock()
        self.seats = [Seat(self, i + 1) for i in range(settings.philo_nbr)]
        for index, seat in enumerate(self.seats):
            seat.fork_right = self.seats[(index + 1) % len(self.seats)].fork_left

    def is_stopped(self) -> bool:
        """Tell whether the dinner has been stopped."""
        with self._dead_lock:
            return self._stop

    def stop(self) -> None:
        with self._dead_lock:
            self._stop = True

    def finish_meals(self) -> None:
        """Count one more finished philosopher; stop once all are done."""
        with self.stop_lock:
            self.finished += 1
            if self.finished == self.settings.philo_nbr:
                self.stop()

    def print(self, seat: Seat, message: str) -> None:
        """Write a timestamped line for ``seat`` unless the dinner has stopped."""
        with self._print_lock:
            elapsed = now_ms() - self.t_start
            if 0 <= elapsed <= _INT_MAX and not self.is_stopped():
                self.out.write(f"{elapsed} {seat.n} {message}")
                self.out.flush()

    def run(self) -> None:
        """Start every philosopher and wait until all of them are done."""
        self.t_start = now_ms()
        threads = [
            threading.Thread(target=seat.live, name=f"seat-{seat.n}")
            for seat in self.seats
        ]
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