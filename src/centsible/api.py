"""Convert Centsible results to JSON friendly dictionaries."""

from __future__ import annotations

import json
from typing import Dict

from .models import AllocationBreakdown, BonusResult, RewardStatement
from .money import to_cents


class ApiExporter:
    """Flatten calculation results into plain numbers for the app's data layer.

    Money is rounded to cents here and nowhere else.
    """

    def bonus_payload(self, bonus: BonusResult) -> Dict[str, object]:
        return {
            "percentage": float(bonus.percentage),
            "amount": float(to_cents(bonus.amount)),
            "tier": bonus.tier_label,
            "qualifies": bonus.qualifies,
        }

    def allocation_payload(self, allocation: AllocationBreakdown) -> Dict[str, object]:
        return {
            "tax_qualified": {
                "taxes": float(to_cents(allocation.taxes)),
                "retirement": float(to_cents(allocation.retirement)),
                "total": float(to_cents(allocation.tax_qualified_total)),
            },
            "savings": float(to_cents(allocation.savings)),
            "discretionary": float(to_cents(allocation.discretionary)),
            "total": float(to_cents(allocation.total)),
        }

    def statement_payload(self, statement: RewardStatement) -> Dict[str, object]:
        return {
            "gpa": float(statement.gpa),
            "grade_count": statement.grade_count,
            "behavior_average": float(statement.behavior_average),
            "assessment_count": statement.assessment_count,
            "accuracy_percentage": statement.accuracy_percentage,
            "behavior_bonus": self.bonus_payload(statement.behavior_bonus),
            "education_bonus": self.bonus_payload(statement.education_bonus),
            "sources": {
                "grades": float(to_cents(statement.grade_income)),
                "bonuses": float(to_cents(statement.bonus_income)),
            },
            "total_income": float(to_cents(statement.total_income)),
            "allocation": self.allocation_payload(statement.allocation),
        }

    def to_json(self, payload: Dict[str, object]) -> str:
        return json.dumps(payload, sort_keys=True)


__all__ = ["ApiExporter"]
