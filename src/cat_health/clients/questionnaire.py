"""Daily health check via interactive questionnaire."""

from dataclasses import dataclass

import questionary
from questionary import Style

from ..models.health import HealthAnswers

custom_style = Style(
    [
        ("qmark", "fg:#8b5cf6 bold"),
        ("question", "bold"),
        ("answer", "fg:#22c55e bold"),
        ("pointer", "fg:#8b5cf6 bold"),
        ("highlighted", "fg:#8b5cf6 bold"),
        ("selected", "fg:#22c55e"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)


@dataclass(frozen=True)
class Question:
    category: str
    prompt: str
    options: tuple[tuple[str, str], ...]  # (code, label)

    @property
    def codes(self) -> list[str]:
        return [code for code, _ in self.options]


QUESTIONS: list[Question] = [
    Question(
        "eating",
        "How many times did your cat eat today?",
        (("0", "Didn't eat at all"), ("1", "Once"), ("2-3", "2-3 times (normal)"), ("4+", "4+ times")),
    ),
    Question(
        "water",
        "How was the water intake today?",
        (("very-little", "Very little"), ("normal", "Normal amount"), ("a-lot", "More than usual")),
    ),
    Question(
        "pee",
        "How many times did your cat pee today?",
        (("0-1", "0-1 times"), ("2-4", "2-4 times (normal)"), ("5+", "5+ times")),
    ),
    Question(
        "poop",
        "How was the poop condition today?",
        (
            ("normal", "Normal & healthy"),
            ("soft", "Soft"),
            ("diarrhea", "Diarrhea"),
            ("no-poop", "Didn't poop today"),
        ),
    ),
    Question(
        "activity",
        "What was your cat's activity level?",
        (
            ("very-active", "Very active & playful"),
            ("normal", "Normal activity"),
            ("lazy", "Lazy, sleeping more"),
            ("hiding", "Hiding or unusual behavior"),
        ),
    ),
    Question(
        "mood",
        "How was your cat's mood today?",
        (
            ("playful", "Playful & happy"),
            ("normal", "Normal"),
            ("aggressive", "Aggressive or irritable"),
            ("depressed", "Depressed or withdrawn"),
        ),
    ),
    Question(
        "vomiting",
        "Any vomiting today?",
        (("no", "No vomiting"), ("once", "Once"), ("more-than-once", "More than once")),
    ),
    Question(
        "appetite",
        "How was the appetite compared to usual?",
        (
            ("normal", "Normal appetite"),
            ("less-than-usual", "Less than usual"),
            ("refusing-food", "Refusing food"),
        ),
    ),
]


class QuestionnaireClient:
    """Interactive questionnaire for the daily health check."""

    async def collect_answers(
        self, cat_name: str, previous: HealthAnswers | None = None
    ) -> HealthAnswers | None:
        """Ask the eight daily questions.

        Args:
            cat_name: Shown in the header
            previous: Earlier answers for today, used as defaults

        Returns:
            The answers, or None if the user aborted
        """
        print(f"\n=== Daily Health Check: {cat_name} ===\n")

        answers = HealthAnswers()
        for i, question in enumerate(QUESTIONS, 1):
            default = getattr(previous, question.category) if previous else None
            if default not in question.codes:
                default = None
            choices = [questionary.Choice(label, code) for code, label in question.options]
            answer = await questionary.select(
                f"({i}/{len(QUESTIONS)}) {question.prompt}",
                choices=choices,
                default=default,
                style=custom_style,
            ).ask_async()

            if answer is None:
                return None
            setattr(answers, question.category, answer)

        return answers
