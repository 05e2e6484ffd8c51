"""Advisory tips for non-ideal daily answers."""

from dataclasses import dataclass, field
from enum import Enum

from ..models.health import HealthAnswers
from .scoring import score_for_answer

MAX_TIPS = 3
PERFECT_SCORE = 10


class Urgency(str, Enum):
    """How soon the owner should act on a tip."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class HealthTip:
    """Advice for one problem answer."""

    category: str
    title: str
    urgency: Urgency
    tips: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "title": self.title,
            "urgency": self.urgency.value,
            "tips": list(self.tips),
        }


def _tip(category: str, title: str, urgency: Urgency, *tips: str) -> HealthTip:
    return HealthTip(category=category, title=title, urgency=urgency, tips=tips)


# Entries exist only for answer codes scoring below PERFECT_SCORE
TIPS_BY_CATEGORY: dict[str, dict[str, HealthTip]] = {
    "eating": {
        "0": _tip(
            "eating", "No Eating Today", Urgency.HIGH,
            "Try warming up their food slightly to enhance aroma",
            "Offer a different protein source (chicken, fish, beef)",
            "Check if food is fresh and hasn't spoiled",
            "If this continues for 24+ hours, consult your vet",
        ),
        "1": _tip(
            "eating", "Reduced Appetite", Urgency.MEDIUM,
            "Monitor for any other symptoms like lethargy",
            "Try adding a small amount of wet food or broth",
            "Ensure the feeding area is quiet and stress-free",
            "Consider if there have been recent changes in routine",
        ),
        "4+": _tip(
            "eating", "Excessive Eating", Urgency.LOW,
            "Consider portion control with measured meals",
            "Rule out conditions like hyperthyroidism or diabetes",
            "Use puzzle feeders to slow down eating",
            "Ensure they're not eating out of boredom",
        ),
    },
    "water": {
        "very-little": _tip(
            "water", "Low Water Intake", Urgency.MEDIUM,
            "Try a cat water fountain, many cats prefer running water",
            "Place multiple water bowls around the house",
            "Add water or broth to wet food",
            "Ensure water is fresh and bowls are clean",
        ),
        "a-lot": _tip(
            "water", "Increased Thirst", Urgency.MEDIUM,
            "Excessive thirst can indicate kidney issues or diabetes",
            "Monitor how often your cat visits the water bowl",
            "Check if the environment is unusually warm",
            "Consider a vet visit if this persists for several days",
        ),
    },
    "pee": {
        "0-1": _tip(
            "pee", "Low Urination", Urgency.HIGH,
            "Ensure your cat has access to clean litter boxes",
            "Watch for signs of straining or discomfort",
            "Encourage water intake with fountains or wet food",
            "Urinary blockage is an emergency: contact a vet if there is no urination in 24h",
        ),
        "5+": _tip(
            "pee", "Frequent Urination", Urgency.MEDIUM,
            "Could indicate urinary tract infection or diabetes",
            "Check if urine appears normal in color",
            "Note any signs of straining or blood",
            "Schedule a vet appointment for urinalysis",
        ),
    },
    "poop": {
        "soft": _tip(
            "poop", "Soft Stool", Urgency.LOW,
            "Temporarily switch to a bland diet (boiled chicken)",
            "Add a small amount of pumpkin puree to food",
            "Ensure food hasn't been changed recently",
            "Probiotics may help restore gut balance",
        ),
        "diarrhea": _tip(
            "poop", "Diarrhea", Urgency.HIGH,
            "Withhold food for 12 hours, then offer bland diet",
            "Keep your cat hydrated and offer water frequently",
            "Watch for blood or mucus in stool",
            "If diarrhea persists 24+ hours, see a vet",
        ),
        "no-poop": _tip(
            "poop", "Constipation", Urgency.MEDIUM,
            "Increase water intake with wet food or fountains",
            "Add a teaspoon of pumpkin puree to meals",
            "Ensure adequate exercise and play",
            "Hairball remedies may help if fur ingestion is suspected",
        ),
    },
    "activity": {
        "lazy": _tip(
            "activity", "Low Activity", Urgency.LOW,
            "Introduce new interactive toys to spark interest",
            "Schedule regular play sessions (15 mins, 2x daily)",
            "Create vertical spaces for climbing",
            "Rule out pain or illness if lethargy is sudden",
        ),
        "hiding": _tip(
            "activity", "Hiding Behavior", Urgency.HIGH,
            "Check for new stressors in the environment",
            "Provide safe hiding spots where they feel secure",
            "Look for signs of pain or illness",
            "Sudden hiding often indicates something is wrong, monitor closely",
        ),
    },
    "mood": {
        "aggressive": _tip(
            "mood", "Aggressive Behavior", Urgency.MEDIUM,
            "Identify and remove potential stress triggers",
            "Ensure they have their own safe space",
            "Never punish, redirect behavior with toys",
            "Consider Feliway or calming supplements",
        ),
        "depressed": _tip(
            "mood", "Depressed Mood", Urgency.HIGH,
            "Spend extra quality time with your cat",
            "Introduce new enrichment activities",
            "Check for any recent changes that may have caused stress",
            "Depression can indicate underlying health issues",
        ),
    },
    "vomiting": {
        "once": _tip(
            "vomiting", "Occasional Vomiting", Urgency.LOW,
            "Monitor for additional episodes",
            "Check if they ate too quickly and try a slow feeder",
            "Hairballs are common, consider hairball remedies",
            "Note what was eaten before vomiting",
        ),
        "more-than-once": _tip(
            "vomiting", "Frequent Vomiting", Urgency.HIGH,
            "Withhold food for a few hours, then offer small amounts",
            "Check for potential toxins or foreign objects ingested",
            "Monitor for blood in vomit",
            "Multiple vomiting episodes require vet attention",
        ),
    },
    "appetite": {
        "less-than-usual": _tip(
            "appetite", "Decreased Appetite", Urgency.MEDIUM,
            "Try different food temperatures and textures",
            "Check for dental issues, pain can reduce appetite",
            "Ensure food bowls are clean and in a quiet location",
            "Stress or changes can temporarily reduce appetite",
        ),
        "refusing-food": _tip(
            "appetite", "Refusing Food", Urgency.HIGH,
            "Cats refusing food for 24+ hours need vet attention",
            "Try highly palatable foods like tuna or baby food (meat only)",
            "Check for mouth sores or dental pain",
            "This is often a sign of illness, don't wait too long",
        ),
    },
}


def get_health_tips(answers: HealthAnswers, limit: int = MAX_TIPS) -> list[HealthTip]:
    """Select the most concerning tips for a day's answers.

    Categories are ranked by their score, lowest first. Ties keep the
    question order. Only answers scoring below a perfect 10 that have an
    advisory entry contribute. An empty list means nothing needs attention.

    Args:
        answers: The day's answers
        limit: Maximum number of tips to return

    Returns:
        Up to ``limit`` tips, most concerning first
    """
    ranked = sorted(
        (
            (score_for_answer(category, answer), category, answer)
            for category, answer in answers.items()
        ),
        key=lambda entry: entry[0],
    )

    tips: list[HealthTip] = []
    for score, category, answer in ranked:
        if len(tips) >= limit:
            break
        if score >= PERFECT_SCORE:
            continue
        tip = TIPS_BY_CATEGORY.get(category, {}).get(answer)
        if tip is not None:
            tips.append(tip)
    return tips
