"""py-seek — disk-head seek scheduling, computed and compared.

Given pending cylinder requests, a starting head position and the size
of the disk, compute the service order and seek cost under four
classic policies: FCFS, SSTF, SCAN and C-SCAN.

Quick start::

    from py_seek import get_all_results

    results = get_all_results([98, 183, 37, 122, 14, 124, 65, 67], 53, 199)
"""

from py_seek.disk import (
    CSCANPolicy,
    Direction,
    DiskPolicy,
    DiskScheduler,
    FCFSPolicy,
    SCANPolicy,
    SSTFPolicy,
    cscan,
    fcfs,
    scan,
    sstf,
)
from py_seek.dispatch import ALGORITHM_INFO, Algorithm, AlgorithmInfo, best_algorithm, get_all_results, run_algorithm
from py_seek.geometry import DiskGeometry, InvalidGeometryError, InvalidRequestError, random_requests
from py_seek.logging import LogEntry, Logger, LogLevel
from py_seek.playback import Playback
from py_seek.seek import ScheduleResult, SeekOperation, SeekTrace

__all__ = [
    "ALGORITHM_INFO",
    "Algorithm",
    "AlgorithmInfo",
    "CSCANPolicy",
    "Direction",
    "DiskGeometry",
    "DiskPolicy",
    "DiskScheduler",
    "FCFSPolicy",
    "InvalidGeometryError",
    "InvalidRequestError",
    "LogEntry",
    "LogLevel",
    "Logger",
    "Playback",
    "SCANPolicy",
    "SSTFPolicy",
    "ScheduleResult",
    "SeekOperation",
    "SeekTrace",
    "best_algorithm",
    "cscan",
    "fcfs",
    "get_all_results",
    "random_requests",
    "run_algorithm",
    "scan",
    "sstf",
]
