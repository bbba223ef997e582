"""
Rules Module — Knowledge Rule Evaluator (KR1-KR5)

Public API:
- RuleContext: One day's readings + fused CHI (+ optional history)
- RuleExecution: One rule's verdict and explanation
- KnowledgeRule: {id, name, predicate, explain} table entry
- KNOWLEDGE_RULES: The rule table in KR1..KR5 order
- execute_all_rules: Evaluate every rule
- get_fired_rules / get_rule_summary: Helpers over a rule run
"""

from .knowledge import (
    KNOWLEDGE_RULES,
    KR1_EMOTIONAL_OVERLOAD,
    KR2_SLEEP_AND_MOOD_CRISIS,
    KR3_COGNITIVE_FATIGUE,
    KR4_SYSTEMIC_OVERLOAD,
    KR5_CRITICAL_BURNOUT,
    KnowledgeRule,
    RuleContext,
    RuleExecution,
    execute_all_rules,
    get_fired_rules,
    get_rule_summary,
    stressed_modalities,
)

__all__ = [
    "KNOWLEDGE_RULES",
    "KR1_EMOTIONAL_OVERLOAD",
    "KR2_SLEEP_AND_MOOD_CRISIS",
    "KR3_COGNITIVE_FATIGUE",
    "KR4_SYSTEMIC_OVERLOAD",
    "KR5_CRITICAL_BURNOUT",
    "KnowledgeRule",
    "RuleContext",
    "RuleExecution",
    "execute_all_rules",
    "get_fired_rules",
    "get_rule_summary",
    "stressed_modalities",
]
