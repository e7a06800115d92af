"""Shared data types for namematch.

Domain-specific types live closer to their consumers:
- Scoring configuration → namematch.scoring.params
- Evaluation results → namematch.evaluation.models
- Audit types → namematch.audit.models
"""

from namematch.models.records import Record

__all__ = ["Record"]
