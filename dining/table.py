"""The dining table: philosophers, forks and the threads that run them."""

from __future__ import annotations

import sys
import threading
import time
from typing import List, Optional, TextIO

from .parsing import Settings
from .timing import now_ms, precise_sleep

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DEAD = "is dead"


class Philosopher:
    """One diner, holding references to the two forks beside it."""

    def __init__(
        self,
        table: "Table",
        philo_id: int,
        left_fork: threading.Lock,
        right_fork: Optional[threading.Lock],
    ) -> None:
        self.table = table
        self.id = philo_id
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.meals_eaten = 0
        self.deadline = table.start_time + table.settings.time_die
        self._lock = threading.Lock()

    def _fork_order(self) -> tuple:
        if self.id % 2 == 0:
            return self.right_fork, self.left_fork
        return self.left_fork, self.right_fork

    def _eat_alone(self) -> None:
        with self.left_fork:
            self.table.print_status(TAKEN_FORK, self.id)
            precise_sleep(self.table.settings.time_die)
            self.table._declare_death(self)

    def eat(self) -> None:
        """Take both forks, eat, then put the forks back."""
        if self.right_fork is None:
            self._eat_alone()
            return
        settings = self.table.settings
        first, second = self._fork_order()
        with first:
            self.table.print_status(TAKEN_FORK, self.id)
            with second:
                self.table.print_status(TAKEN_FORK, self.id)
                with self._lock:
                    self.deadline = now_ms() + settings.time_die
                self.table.print_status(EATING, self.id)
                precise_sleep(settings.time_eat)
                with self._lock:
                    self.meals_eaten += 1

    def sleep(self) -> None:
        """Announce sleeping and sleep for the configured time."""
        self.table.print_status(SLEEPING, self.id)
        precise_sleep(self.table.settings.time_sleep)

    def routine(self) -> None:
        """Eat, sleep and think until the simulation ends."""
        finished = self.table.finished
        if self.id % 2 == 0:
            precise_sleep(self.table.settings.time_eat // 2)
        while not finished.is_set():
            self.eat()
            if finished.is_set():
                break
            self.sleep()
            if finished.is_set():
                break
            self.table.print_status(THINKING, self.id)

    def current_deadline(self) -> int:
        with self._lock:
            return self.deadline

    def meals(self) -> int:
        with self._lock:
            return self.meals_eaten


class Table:
    """Shared state of one simulation run."""

    def __init__(self, settings: Settings, output: Optional[TextIO] = None) -> None:
        self.settings = settings
        self.output = output if output is not None else sys.stdout
        self.finished = threading.Event()
        self.died = False
        self.start_time = now_ms()
        self._print_lock = threading.RLock()
        count = settings.num_philos
        self.forks: List[threading.Lock] = [threading.Lock() for _ in range(count)]
        if count == 1:
            self.philosophers = [Philosopher(self, 1, self.forks[0], None)]
        else:
            self.philosophers = [
                Philosopher(self, i + 1, self.forks[i], self.forks[(i + 1) % count])
                for i in range(count)
            ]

    def print_status(self, message: str, philo_id: int) -> bool:
        """Write one status line unless the simulation has finished."""
        with self._print_lock:
            if self.finished.is_set():
                return False
            elapsed = now_ms() - self.start_time
            self.output.write(f"{elapsed} {philo_id} {message}\n")
            self.output.flush()
            return True

    def _declare_death(self, philosopher: Philosopher) -> None:
        with self._print_lock:
            if self.finished.is_set():
                return
            self.print_status(DEAD, philosopher.id)
            self.died = True
            self.finished.set()

    def _all_fed(self) -> bool:
        limit = self.settings.num_eat
        return limit is not None and all(p.meals() >= limit for p in self.philosophers)

    def watch(self, philosopher: Philosopher) -> None:
        """Monitor one philosopher until it starves or the meals are done."""
        while not self.finished.is_set():
            if now_ms() >= philosopher.current_deadline():
                self._declare_death(philosopher)
                return
            if self._all_fed():
                with self._print_lock:
                    self.finished.set()
                return
            time.sleep(0.001)

    def run(self) -> bool:
        """Run the simulation to its end; return True if someone died."""
        self.start_time = now_ms()
        for philosopher in self.philosophers:
            with philosopher._lock:
                philosopher.deadline = self.start_time + self.settings.time_die
        threads = []
        for philosopher in self.philosophers:
            threads.append(threading.Thread(target=philosopher.routine, daemon=True))
            threads.append(
                threading.Thread(target=self.watch, args=(philosopher,), daemon=True)
            )
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return self.died