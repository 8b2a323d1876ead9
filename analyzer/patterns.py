"""
Keyword pattern tables for the content analyzer.

Every scored concept (an Element of Value, a CliftonStrengths theme, or a
Golden Circle dimension) is described by an ordered tuple of trigger
keywords. The tables are built once at import time and exposed through
read-only mappings so they can be shared by every request.

Categories and domains keep their camelCase keys because they are part of
the JSON returned to the dashboard.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


@dataclass(frozen=True)
class ConceptPattern:
    """A named scoring concept and the keywords that count as evidence for it."""

    name: str
    triggers: Tuple[str, ...]
    label: str = ""

    @property
    def display_name(self) -> str:
        return self.label or self.name


def _table(rows: Dict[str, Tuple[Tuple[str, Tuple[str, ...], str], ...]]) -> Mapping[str, Tuple[ConceptPattern, ...]]:
    return MappingProxyType(
        {
            category: tuple(ConceptPattern(name, triggers, label) for name, triggers, label in concepts)
            for category, concepts in rows.items()
        }
    )


# ======================
# Bain Elements of Value
# ======================

ELEMENTS_OF_VALUE = _table(
    {
        "functional": (
            ("savesTime", ("time-saving", "efficient", "streamline", "automate"), "time-saving"),
            ("reducesCost", ("cost reduction", "save money", "affordable", "roi"), "cost reduction"),
            ("reducesEffort", ("simplify", "easy", "effortless", "streamlined"), "effort reduction"),
            ("reducesRisk", ("risk reduction", "secure", "safe", "reliable"), "risk mitigation"),
            ("organizes", ("organize", "structure", "system", "framework"), "organization"),
            ("integrates", ("integrate", "connect", "unify", "combine"), "integration"),
            ("connects", ("connect", "network", "community", "relationship"), "connection"),
            ("quality", ("quality", "excellent", "premium", "superior"), "quality"),
            ("variety", ("variety", "diverse", "multiple", "range"), "variety"),
            ("simplicity", ("simple", "clear", "straightforward", "easy"), "simplicity"),
            ("convenience", ("convenient", "accessible", "available", "ready"), "convenience"),
        ),
        "emotional": (
            ("reducesAnxiety", ("confidence", "peace", "security", "trust"), "anxiety reduction"),
            ("rewards", ("reward", "benefit", "advantage", "gain"), "reward"),
            ("design", ("design", "aesthetic", "beautiful", "attractive"), "design"),
            ("fun", ("fun", "enjoyable", "engaging", "exciting"), "fun"),
            ("wellness", ("wellness", "health", "wellbeing", "thrive"), "wellness"),
            ("belonging", ("community", "belonging", "family", "team"), "belonging"),
        ),
        "lifeChanging": (
            ("selfActualization", ("potential", "growth", "transformation", "development"), "self-actualization"),
            ("motivation", ("motivation", "inspire", "empower", "drive"), "motivation"),
            ("makesMoney", ("revenue", "profit", "income", "financial"), "financial benefit"),
            ("providesAccess", ("access", "opportunity", "available", "reach"), "access"),
        ),
        "socialImpact": (
            ("selfTranscendence", ("greater good", "make a difference", "change the world", "mission-driven"), "self-transcendence"),
            ("givesBack", ("give back", "donate", "charity", "nonprofit"), "giving back"),
            ("sustainability", ("sustainable", "sustainability", "environment", "carbon"), "sustainability"),
            ("communityImpact", ("social impact", "local communit", "volunteer", "underserved"), "community impact"),
        ),
    }
)


# ======================
# Gallup CliftonStrengths
# ======================

STRENGTHS = _table(
    {
        "executing": (
            ("achiever", ("achieve", "accomplish", "complete", "finish"), "achievement"),
            ("arranger", ("arrange", "organize", "coordinate", "structure"), "arrangement"),
            ("belief", ("believe", "values", "principles", "ethics"), "belief"),
            ("consistency", ("consistent", "fair", "equal", "standard"), "consistency"),
            ("deliberative", ("careful", "cautious", "thoughtful", "deliberate"), "deliberation"),
            ("discipline", ("discipline", "routine", "structure", "order"), "discipline"),
            ("focus", ("focus", "concentrate", "priority", "direction"), "focus"),
            ("responsibility", ("responsible", "accountable", "commitment", "ownership"), "responsibility"),
            ("restorative", ("restore", "fix", "repair", "solve"), "restorative"),
        ),
        "influencing": (
            ("activator", ("activate", "start", "begin", "initiate"), "activation"),
            ("command", ("command", "lead", "control", "authority"), "command"),
            ("communication", ("communicate", "explain", "express", "share"), "communication"),
            ("competition", ("compete", "win", "best", "superior"), "competition"),
            ("maximizer", ("maximize", "excel", "improve", "enhance"), "maximization"),
            ("selfAssurance", ("confident", "certain", "assured", "decisive"), "self-assurance"),
            ("significance", ("significant", "important", "meaningful", "impact"), "significance"),
            ("woo", ("woo", "charm", "persuade", "influence"), "woo"),
        ),
        "relationshipBuilding": (
            ("adaptability", ("adapt", "flexible", "adjust", "change"), "adaptability"),
            ("connectedness", ("connect", "unite", "together", "bond"), "connectedness"),
            ("developer", ("develop", "grow", "potential", "improve"), "development"),
            ("empathy", ("empathy", "understand", "feel", "compassion"), "empathy"),
            ("harmony", ("harmony", "peace", "agree", "consensus"), "harmony"),
            ("includer", ("include", "welcome", "accept", "embrace"), "inclusion"),
            ("individualization", ("individual", "unique", "personal", "custom"), "individualization"),
            ("positivity", ("positive", "optimistic", "enthusiastic", "cheerful"), "positivity"),
            ("relator", ("relate", "bond", "close", "intimate"), "relator"),
        ),
        "strategicThinking": (
            ("analytical", ("analyze", "logic", "data", "evidence"), "analytical"),
            ("context", ("context", "history", "background", "past"), "context"),
            ("futuristic", ("future", "vision", "ahead", "tomorrow"), "futuristic"),
            ("ideation", ("idea", "creative", "innovative", "imagine"), "ideation"),
            ("input", ("input", "collect", "gather", "information"), "input"),
            ("intellection", ("think", "intellectual", "mental", "cognitive"), "intellection"),
            ("learner", ("learn", "study", "education", "knowledge"), "learning"),
            ("strategic", ("strategic", "plan", "strategy", "approach"), "strategic"),
        ),
    }
)


# ======================
# Golden Circle evidence keywords
# ======================

GOLDEN_CIRCLE_KEYWORDS = MappingProxyType(
    {
        "why": ConceptPattern("why", ("mission", "purpose", "values", "believe", "vision"), "purpose"),
        "how": ConceptPattern("how", ("methodology", "process", "approach", "framework", "system"), "methodology"),
        "what": ConceptPattern("what", ("products", "services", "solutions", "offer", "provide"), "offering"),
        "who": ConceptPattern("who", ("testimonials", "clients", "customers", "success", "growth"), "audience"),
    }
)

DIMENSIONS: Tuple[str, ...] = ("why", "how", "what", "who")

# Named methodologies, services and offerings that replace a generic match
# when they appear as a full sentence.
NAMED_METHODOLOGIES: Tuple[str, ...] = (
    "Attitude Cycle",
    "IMPROV Sales Methodology",
    "Purpose-Driven Exercise",
)
NAMED_SERVICES: Tuple[str, ...] = (
    "Human Transformation",
    "Technology Enablement",
    "Revenue Acceleration",
)
NAMED_OFFERINGS: Tuple[str, ...] = (
    "Custom software development",
    "Salesforce implementation",
    "Sales process optimization",
)


def concept_count() -> Dict[str, int]:
    """Number of concepts per taxonomy, used by the status endpoint."""
    return {
        "elements_of_value": sum(len(c) for c in ELEMENTS_OF_VALUE.values()),
        "clifton_strengths": sum(len(c) for c in STRENGTHS.values()),
        "golden_circle": len(GOLDEN_CIRCLE_KEYWORDS),
    }
