"""Input clients for cat-health."""

from .questionnaire import QUESTIONS, QuestionnaireClient

__all__ = ["QUESTIONS", "QuestionnaireClient"]
