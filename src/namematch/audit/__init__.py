"""Audit logging subsystem for namematch.

Main Components
---------------
- AuditLogger: JSONL event logger
- generate_run_id: run identifier factory
"""

from namematch.audit.helpers import generate_run_id
from namematch.audit.logger import AuditLogger
from namematch.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
]
