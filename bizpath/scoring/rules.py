"""Rule tables for the fit scorer.

Each path has an ordered tuple of independent rules; every rule is checked
and adds its delta when its predicate holds. Universal rules run for every
path afterwards, some restricted to a set of paths.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from bizpath.scoring.models import Number, QuizResponse, ResolvedInputs

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

Predicate = Callable[[QuizResponse, ResolvedInputs], bool]

QUICK_TIMELINES = frozenset({"under-1-month", "1-3-months"})
SOLO_PREFERENCES = frozenset({"solo-only", "mostly-solo"})


@dataclass(frozen=True)
class Rule:
    """A path-specific point adjustment."""

    label: str
    delta: int
    applies: Predicate


@dataclass(frozen=True)
class UniversalRule:
    """A point adjustment evaluated for every path.

    `paths` limits the adjustment to the listed path ids; `None` means all.
    """

    label: str
    delta: int
    applies: Predicate
    paths: frozenset[str] | None = None

    def matches(self, path_id: str) -> bool:
        return self.paths is None or path_id in self.paths


def _at_least(value: Number | None, minimum: int) -> bool:
    # Unanswered (and zero) ratings never trigger a rule
    return bool(value) and value >= minimum


def _at_most(value: Number | None, maximum: int) -> bool:
    return bool(value) and value <= maximum


def _works_solo(r: QuizResponse) -> bool:
    return r.work_collaboration_preference in SOLO_PREFERENCES


def _knows_coding(r: QuizResponse) -> bool:
    return "coding" in (r.familiar_tools or []) or "coding" in (
        r.existing_skills or []
    )


def _paths(*path_ids: str) -> frozenset[str]:
    return frozenset(path_ids)


PATH_RULES: dict[str, tuple[Rule, ...]] = {
    "content-creation-ugc": (
        Rule("income goal up to $5K", 15, lambda r, v: v.income_goal <= 5000),
        Rule(
            "patient income timeline",
            10,
            lambda r, v: v.income_timeline in {"6-12-months", "1-year-plus", "no-rush"},
        ),
        Rule("low risk tolerance", 8, lambda r, v: v.risk_tolerance <= 2),
        Rule(
            "comfortable being the face of a brand",
            10,
            lambda r, v: _at_least(r.brand_face_comfort, 4),
        ),
        Rule(
            "enjoys creative work",
            8,
            lambda r, v: _at_least(r.creative_work_enjoyment, 4),
        ),
        Rule(
            "strong social media interest",
            7,
            lambda r, v: _at_least(r.social_media_interest, 4),
        ),
    ),
    "youtube-automation": (
        Rule("income goal $5K+", 15, lambda r, v: v.income_goal >= 5000),
        Rule(
            "3-12 month income timeline",
            12,
            lambda r, v: v.income_timeline in {"3-6-months", "6-12-months"},
        ),
        Rule("budget $500+", 10, lambda r, v: v.budget >= 500),
        Rule(
            "logical decision maker",
            8,
            lambda r, v: r.decision_making_style == "logical-process",
        ),
        Rule("prefers working solo", 7, lambda r, v: _works_solo(r)),
        Rule("strong tech skills", 6, lambda r, v: v.tech_skills >= 4),
    ),
    "local-service-arbitrage": (
        Rule(
            "income goal $2K-$15K",
            15,
            lambda r, v: 2000 <= v.income_goal <= 15000,
        ),
        Rule(
            "wants income quickly",
            15,
            lambda r, v: v.income_timeline in QUICK_TIMELINES,
        ),
        Rule(
            "enjoys direct communication",
            12,
            lambda r, v: _at_least(r.direct_communication_enjoyment, 4),
        ),
        Rule(
            "comfortable on client calls",
            8,
            lambda r, v: r.client_calls_comfort == "yes",
        ),
        Rule("competitive", 7, lambda r, v: _at_least(r.competitiveness_level, 4)),
    ),
    "high-ticket-sales": (
        Rule("income goal $5K+", 18, lambda r, v: v.income_goal >= 5000),
        Rule(
            "wants income quickly",
            15,
            lambda r, v: v.income_timeline in QUICK_TIMELINES,
        ),
        Rule(
            "enjoys direct communication",
            15,
            lambda r, v: _at_least(r.direct_communication_enjoyment, 4),
        ),
        Rule("competitive", 10, lambda r, v: _at_least(r.competitiveness_level, 4)),
        Rule(
            "comfortable on client calls",
            8,
            lambda r, v: r.client_calls_comfort == "yes",
        ),
        Rule("highly self-motivated", 7, lambda r, v: v.self_motivation >= 4),
    ),
    "app-saas-development": (
        Rule("income goal $10K+", 18, lambda r, v: v.income_goal >= 10000),
        Rule("strong tech skills", 20, lambda r, v: v.tech_skills >= 4),
        Rule("knows how to code", 15, lambda r, v: _knows_coding(r)),
        Rule(
            "logical decision maker",
            10,
            lambda r, v: r.decision_making_style == "logical-process",
        ),
        Rule("prefers working solo", 8, lambda r, v: _works_solo(r)),
        Rule("30+ hours per week", 6, lambda r, v: v.weekly_hours >= 30),
    ),
    "affiliate-marketing": (
        Rule("income goal up to $10K", 15, lambda r, v: v.income_goal <= 10000),
        Rule(
            "patient income timeline",
            12,
            lambda r, v: v.income_timeline in {"3-6-months", "6-12-months", "no-rush"},
        ),
        Rule(
            "enjoys creative work",
            10,
            lambda r, v: _at_least(r.creative_work_enjoyment, 3),
        ),
        Rule(
            "interested in social media",
            8,
            lambda r, v: _at_least(r.social_media_interest, 3),
        ),
        Rule(
            "wants to create once and earn passively",
            7,
            lambda r, v: r.work_style_preference == "create-once-earn-passively",
        ),
        Rule("highly self-motivated", 5, lambda r, v: v.self_motivation >= 4),
    ),
    "freelancing": (
        Rule(
            "income goal $1K-$15K",
            15,
            lambda r, v: 1000 <= v.income_goal <= 15000,
        ),
        Rule(
            "wants income quickly",
            12,
            lambda r, v: v.income_timeline in QUICK_TIMELINES,
        ),
        Rule("prefers working solo", 10, lambda r, v: _works_solo(r)),
        Rule(
            "comfortable with direct communication",
            8,
            lambda r, v: _at_least(r.direct_communication_enjoyment, 3),
        ),
        Rule("highly self-motivated", 7, lambda r, v: v.self_motivation >= 4),
        Rule("budget up to $500", 6, lambda r, v: v.budget <= 500),
    ),
    "e-commerce-dropshipping": (
        Rule("income goal $3K+", 15, lambda r, v: v.income_goal >= 3000),
        Rule("budget $500+", 12, lambda r, v: v.budget >= 500),
        Rule(
            "interested in social media",
            10,
            lambda r, v: _at_least(r.social_media_interest, 3),
        ),
        Rule("comfortable with tech", 8, lambda r, v: v.tech_skills >= 3),
        Rule(
            "not open to shipping physical products",
            -10,
            lambda r, v: r.physical_shipping_openness == "no",
        ),
        Rule("20+ hours per week", 6, lambda r, v: v.weekly_hours >= 20),
    ),
    "online-coaching-consulting": (
        Rule("income goal $2K+", 15, lambda r, v: v.income_goal >= 2000),
        Rule(
            "enjoys direct communication",
            12,
            lambda r, v: _at_least(r.direct_communication_enjoyment, 4),
        ),
        Rule(
            "likes teaching",
            10,
            lambda r, v: r.teach_vs_solve_preference in {"teach", "both"},
        ),
        Rule(
            "comfortable being the face of a brand",
            8,
            lambda r, v: _at_least(r.brand_face_comfort, 4),
        ),
        Rule(
            "comfortable on client calls",
            7,
            lambda r, v: r.client_calls_comfort == "yes",
        ),
        Rule(
            "values meaningful contribution",
            6,
            lambda r, v: _at_least(r.meaningful_contribution_importance, 4),
        ),
    ),
    "print-on-demand": (
        Rule("income goal up to $5K", 12, lambda r, v: v.income_goal <= 5000),
        Rule(
            "enjoys creative work",
            15,
            lambda r, v: _at_least(r.creative_work_enjoyment, 4),
        ),
        Rule("budget up to $500", 10, lambda r, v: v.budget <= 500),
        # Fulfilment is handled by the print partner
        Rule(
            "prefers not to ship products",
            8,
            lambda r, v: r.physical_shipping_openness == "no",
        ),
        Rule("prefers working solo", 7, lambda r, v: _works_solo(r)),
        Rule(
            "interested in social media",
            6,
            lambda r, v: _at_least(r.social_media_interest, 3),
        ),
    ),
    "virtual-assistant": (
        Rule("income goal up to $5K", 15, lambda r, v: v.income_goal <= 5000),
        Rule(
            "wants income quickly",
            12,
            lambda r, v: v.income_timeline in QUICK_TIMELINES,
        ),
        Rule("well organized", 10, lambda r, v: _at_least(r.organization_level, 4)),
        Rule(
            "comfortable with direct communication",
            8,
            lambda r, v: _at_least(r.direct_communication_enjoyment, 3),
        ),
        Rule("budget up to $100", 7, lambda r, v: v.budget <= 100),
        Rule("comfortable with tech", 6, lambda r, v: v.tech_skills >= 3),
    ),
}


_TECH_HEAVY = _paths("content-creation-ugc", "youtube-automation", "app-saas-development")
_LOW_TIME_FRIENDLY = _paths("affiliate-marketing", "content-creation-ugc", "virtual-assistant")
_HIGH_TIME_REWARDING = _paths(
    "app-saas-development", "youtube-automation", "e-commerce-dropshipping"
)
_LOW_RISK = _paths("affiliate-marketing", "virtual-assistant", "freelancing")
_HIGH_RISK = _paths("high-ticket-sales", "app-saas-development", "e-commerce-dropshipping")
_ZERO_BUDGET_FRIENDLY = _paths(
    "content-creation-ugc", "affiliate-marketing", "virtual-assistant", "freelancing"
)
_NEEDS_CAPITAL = _paths("e-commerce-dropshipping", "youtube-automation")
_CONVERSATION_HEAVY = _paths(
    "high-ticket-sales", "local-service-arbitrage", "online-coaching-consulting"
)
_LOW_CONTACT = _paths("affiliate-marketing", "youtube-automation", "print-on-demand")


UNIVERSAL_RULES: tuple[UniversalRule, ...] = (
    UniversalRule("highly self-motivated", 8, lambda r, v: v.self_motivation >= 4),
    UniversalRule("low self-motivation", -5, lambda r, v: v.self_motivation <= 2),
    UniversalRule(
        "limited tech skills for a tech-heavy path",
        -8,
        lambda r, v: v.tech_skills <= 2,
        _TECH_HEAVY,
    ),
    UniversalRule("strong tech skills", 5, lambda r, v: v.tech_skills >= 4),
    UniversalRule(
        "fits in 10 hours a week",
        10,
        lambda r, v: v.weekly_hours <= 10,
        _LOW_TIME_FRIENDLY,
    ),
    UniversalRule(
        "10 hours a week is too little",
        -8,
        lambda r, v: v.weekly_hours <= 10,
        _paths("app-saas-development"),
    ),
    UniversalRule(
        "40+ hours a week pays off",
        10,
        lambda r, v: v.weekly_hours >= 40,
        _HIGH_TIME_REWARDING,
    ),
    UniversalRule(
        "low-risk path for a cautious profile",
        8,
        lambda r, v: v.risk_tolerance <= 2,
        _LOW_RISK,
    ),
    UniversalRule(
        "high-risk path for a risk taker",
        8,
        lambda r, v: v.risk_tolerance >= 4,
        _HIGH_RISK,
    ),
    UniversalRule(
        "startable with no money",
        10,
        lambda r, v: v.budget == 0,
        _ZERO_BUDGET_FRIENDLY,
    ),
    UniversalRule(
        "needs capital but budget is zero",
        -10,
        lambda r, v: v.budget == 0,
        _NEEDS_CAPITAL,
    ),
    UniversalRule(
        "dislikes direct communication",
        -10,
        lambda r, v: _at_most(r.direct_communication_enjoyment, 2),
        _CONVERSATION_HEAVY,
    ),
    UniversalRule(
        "low-contact path for a quiet profile",
        6,
        lambda r, v: _at_most(r.direct_communication_enjoyment, 2),
        _LOW_CONTACT,
    ),
    UniversalRule(
        "enjoys direct communication",
        6,
        lambda r, v: _at_least(r.direct_communication_enjoyment, 4),
        _CONVERSATION_HEAVY,
    ),
)


def referenced_path_ids(
    path_rules: dict[str, tuple[Rule, ...]] = PATH_RULES,
    universal_rules: Iterable[UniversalRule] = UNIVERSAL_RULES,
) -> set[str]:
    """Return every path id a rule refers to."""
    ids = set(path_rules)
    for rule in universal_rules:
        if rule.paths is not None:
            ids.update(rule.paths)
    return ids
