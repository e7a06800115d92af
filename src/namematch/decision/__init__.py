"""Decision layer: commit to a collection or report no decision."""

from namematch.decision.classifier import TopChoice, select_top, top_choice

__all__ = ["TopChoice", "select_top", "top_choice"]
