"""
Process Runner Module

Spawns the command to measure, waits for it, and gathers the accounting
the kernel keeps for terminated children.
"""
import logging
import resource
import time
from dataclasses import dataclass
from typing import Optional

import psutil

from usage.consts.CpuDivisor import CpuDivisor
from usage.errors import ClockError, ExecError, SpawnError, UsageQueryError
from usage.models import DerivedMetrics, Invocation, ResourceUsageSnapshot, TimingSample, UsageReport

logger = logging.getLogger(__name__)


@dataclass
class ProcessRunResult:
    """Outcome of one measured run"""
    report: UsageReport
    # None when the program could not be executed
    returncode: Optional[int]
    exec_error: Optional[ExecError] = None


def read_clock(which: str) -> float:
    try:
        return time.time()
    except OSError as e:
        raise ClockError(which, e) from e


def query_children_usage() -> ResourceUsageSnapshot:
    """
    Resource usage of all terminated, waited-for children.

    Raises:
        UsageQueryError: If getrusage() fails
    """
    try:
        rusage = resource.getrusage(resource.RUSAGE_CHILDREN)
    except OSError as e:
        raise UsageQueryError(e) from e
    return ResourceUsageSnapshot.from_rusage(rusage)


class ProcessRunner:
    """Run one command to completion and measure it"""

    def __init__(self, invocation: Invocation, divisor: CpuDivisor = CpuDivisor.SUM):
        """
        Initialize process runner.

        Args:
            invocation: Command and arguments to execute
            divisor: Denominator interpretation for the normalized sizes
        """
        self.invocation = invocation
        self.divisor = divisor

    def run(self) -> ProcessRunResult:
        """
        Spawn the command, block until it terminates, then sample the clock
        and the children's resource usage.

        Returns:
            ProcessRunResult with the full report. If the program could not
            be executed, exec_error is set and the report is degenerate.

        Raises:
            SpawnError, ClockError, UsageQueryError
        """
        start = read_clock("start")

        returncode = None
        exec_error = None
        try:
            process = self._spawn()
        except ExecError as e:
            exec_error = e
        else:
            returncode = self._wait(process)

        end = read_clock("end")
        snapshot = query_children_usage()
        derived = DerivedMetrics.from_snapshot(snapshot, self.divisor)

        report = UsageReport(
            timing=TimingSample(start=start, end=end),
            usage=snapshot,
            derived=derived
        )
        return ProcessRunResult(report=report, returncode=returncode, exec_error=exec_error)

    def _spawn(self) -> psutil.Popen:
        """Start the child with inherited streams and environment, no shell."""
        try:
            process = psutil.Popen(self.invocation.to_list())
        except OSError as e:
            # Failures inside the child's exec are relayed with the program as filename
            if e.filename is not None:
                raise ExecError(self.invocation.program, e) from e
            raise SpawnError(e) from e

        try:
            name = process.name()
        except psutil.Error:
            # The child may already have exited
            name = self.invocation.program
        logger.debug(f"Spawned {name} [PID: {process.pid}]: {' '.join(self.invocation.argv)}")
        return process

    def _wait(self, process: psutil.Popen) -> int:
        returncode = process.wait()
        logger.debug(f"Process {process.pid} terminated with status {returncode}")
        return returncode
