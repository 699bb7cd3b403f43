"""Process scanning for server candidates."""

from __future__ import annotations

import logging
from typing import List, Protocol, Sequence

import psutil

from .models import ProcessCandidate
from .port_extractor import PORT_FLAG

logger = logging.getLogger(__name__)


class ProcessScanner(Protocol):
    """Anything that can list server candidates."""

    def scan(self) -> List[ProcessCandidate]: ...


def _join_cmdline(cmdline_value: object) -> str:
    if not isinstance(cmdline_value, (list, tuple)):
        return ""
    return " ".join(str(arg) for arg in cmdline_value)


def matches_signature(cmdline: str, signature: str) -> bool:
    """Return True when ``cmdline`` names the tool and passes a port flag."""
    return signature in cmdline and PORT_FLAG in cmdline


class PsutilProcessScanner:
    """Scans the OS process table with psutil."""

    def __init__(self, signature: str):
        self.signature = signature

    def scan(self) -> List[ProcessCandidate]:
        """Return candidates in process-table enumeration order."""
        candidates: List[ProcessCandidate] = []
        for proc in psutil.process_iter(["pid", "cmdline"]):
            try:
                pid = proc.info["pid"]
                cmdline = _join_cmdline(proc.info.get("cmdline"))
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                continue
            if not matches_signature(cmdline, self.signature):
                continue
            logger.debug("Found %s candidate: PID %s - %s", self.signature, pid, cmdline[:100])
            candidates.append(ProcessCandidate(pid=int(pid), cmdline=cmdline))

        logger.debug("Process scan found %d %s candidates", len(candidates), self.signature)
        return candidates


__all__ = ["ProcessScanner", "PsutilProcessScanner", "matches_signature"]
