"""Threads working together: joining workers, guarding shared state and passing values."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from queue import Empty, SimpleQueue


def run_workers(count: int = 10, delay: float = 0.25) -> int:
    """Start `count` sleeping workers, wait for all of them and return how many finished."""

    def work(index: int) -> None:
        time.sleep(delay)
        print(f"thread {index} is complete")

    handles = [threading.Thread(target=work, args=(index,)) for index in range(count)]
    for handle in handles:
        handle.start()

    completed = 0
    for handle in handles:
        handle.join()
        completed += 1

    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


@dataclass
class JobStatus:
    """A counter of finished jobs, shared between threads under a lock."""

    jobs_completed: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


def count_jobs(count: int = 10, delay: float = 0.25) -> int:
    """Let `count` workers each record one finished job; return the final tally."""
    status = JobStatus()

    def work() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    handles = [threading.Thread(target=work) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        with status.lock:
            print(f"jobs completed {status.jobs_completed}")
    return status.jobs_completed


@dataclass
class Queue:
    """Values to be sent, split into two halves for two senders."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(queue: Queue, channel, delay: float = 1.0) -> list[threading.Thread]:
    """Start one sender per half of the queue, each putting its values on the channel."""

    def send(values: list[int]) -> None:
        for value in values:
            print(f"sending {value}")
            channel.put(value)
            time.sleep(delay)

    senders = [
        threading.Thread(target=send, args=(queue.first_half,)),
        threading.Thread(target=send, args=(queue.second_half,)),
    ]
    for sender in senders:
        sender.start()
    return senders


def receive_all(queue: Queue, delay: float = 1.0) -> list[int]:
    """Receive every value the senders produce, in arrival order.

    Raises RuntimeError when the number received differs from the queue's length.
    """
    channel: SimpleQueue = SimpleQueue()
    senders = send_tx(queue, channel, delay)
    received: list[int] = []

    def take(value: int) -> None:
        print(f"Got: {value}")
        received.append(value)

    while any(sender.is_alive() for sender in senders):
        try:
            take(channel.get(timeout=0.05))
        except Empty:
            continue
    for sender in senders:
        sender.join()
    while True:
        try:
            take(channel.get_nowait())
        except Empty:
            break

    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers, expected {queue.length}"
        )
    return received