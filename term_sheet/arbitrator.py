"""Selection between the competing extraction strategies."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .logging import get_logger
from .models import ArbitrationResult, TermAssignment
from .strategies import ExtractionStrategy, PatternStrategy, StructuralStrategy, TableStrategy

logger = get_logger(__name__)

METHOD_ERROR = "Error"

# Declaration order is the tie-break order.
DEFAULT_STRATEGIES: Sequence[ExtractionStrategy] = (
    PatternStrategy(),
    TableStrategy(),
    StructuralStrategy(),
)


def _valid_count(records: Sequence[TermAssignment]) -> int:
    return sum(1 for record in records if record.is_valid())


def parse_assignments(
    text: str,
    strategies: Sequence[ExtractionStrategy] = DEFAULT_STRATEGIES,
    prefer_earlier_on_tie: bool = True,
) -> ArbitrationResult:
    """Run every strategy and keep the one yielding the most valid records.

    With ``prefer_earlier_on_tie`` the first-declared strategy wins a tie,
    otherwise the last one does. The winner's records are filtered to those
    naming a part or a justice. Any error yields an empty ``"Error"`` result.
    """
    if not strategies:
        logger.error("arbitration_failed", error="no extraction strategies configured")
        return ArbitrationResult(assignments=[], method=METHOD_ERROR)

    try:
        best: Optional[ExtractionStrategy] = None
        best_records: List[TermAssignment] = []
        best_count = -1
        for strategy in strategies:
            records = strategy.extract(text)
            count = _valid_count(records)
            logger.info(
                "strategy_evaluated",
                strategy=strategy.name.value,
                records=len(records),
                valid=count,
            )
            improved = count > best_count if prefer_earlier_on_tie else count >= best_count
            if improved:
                best, best_records, best_count = strategy, records, count

        assignments = [record for record in best_records if record.is_valid()]
        logger.info("strategy_selected", strategy=best.name.value, assignments=len(assignments))
        return ArbitrationResult(assignments=assignments, method=best.name.value)
    except Exception as exc:
        logger.exception("arbitration_failed", error=str(exc))
        return ArbitrationResult(assignments=[], method=METHOD_ERROR)
