import logging
from typing import Iterable, Sequence

from ..models.insight_models import AIInsight
from .insight_rules import DEFAULT_RULES, InsightInputs, InsightRule
from .knowledge_base import KnowledgeBase

logger = logging.getLogger(__name__)


class InsightGenerator:
    def __init__(self, knowledge_base: KnowledgeBase, rules: Sequence[InsightRule] = DEFAULT_RULES):
        self.knowledge_base = knowledge_base
        self.rules = tuple(rules)

    def generate(self, inputs: InsightInputs) -> list[AIInsight]:
        insights: list[AIInsight] = []
        for rule in self.rules:
            for binding in rule.evaluate(inputs, self.knowledge_base):
                insights.append(rule.build(binding, insight_id=f"{rule.rule_id}_{len(insights)}"))

        logger.info(f"Generated {len(insights)} insights from {len(self.rules)} rules")
        return prioritize_insights(insights)


def prioritize_insights(insights: Iterable[AIInsight]) -> list[AIInsight]:
    """Order by kind (critical, warning, suggestion, info), then by confidence.

    ``sorted`` is stable, so insights that tie on both keep generation order.
    """
    return sorted(insights, key=lambda insight: (-insight.kind.rank, -insight.confidence))
