"""Tests for the health tip selector."""

from cat_health.models.health import HealthAnswers
from cat_health.services.scoring import SCORE_TABLE, score_for_answer
from cat_health.services.tips import TIPS_BY_CATEGORY, Urgency, get_health_tips


class TestTipTable:
    """Tests for the advisory data."""

    def test_only_non_ideal_codes_have_tips(self):
        for category, codes in TIPS_BY_CATEGORY.items():
            for code, tip in codes.items():
                assert code in SCORE_TABLE[category]
                assert score_for_answer(category, code) < 10
                assert tip.category == category

    def test_every_entry_has_suggestions(self):
        for codes in TIPS_BY_CATEGORY.values():
            for tip in codes.values():
                assert tip.title
                assert len(tip.tips) == 4
                assert isinstance(tip.urgency, Urgency)


class TestGetHealthTips:
    """Tests for get_health_tips."""

    def test_healthy_cat_gets_no_tips(self, healthy_answers):
        assert get_health_tips(healthy_answers) == []

    def test_at_most_three(self, worst_answers):
        assert len(get_health_tips(worst_answers)) == 3

    def test_worst_first(self, worst_answers):
        # eating=0 scores 0, then vomiting/appetite at 1
        tips = get_health_tips(worst_answers)
        assert [t.category for t in tips] == ["eating", "vomiting", "appetite"]

    def test_ties_keep_question_order(self, healthy_answers):
        healthy_answers.poop = "diarrhea"  # 2
        healthy_answers.activity = "hiding"  # 2
        healthy_answers.mood = "depressed"  # 2
        healthy_answers.water = "very-little"  # 3
        tips = get_health_tips(healthy_answers)
        assert [t.title for t in tips] == ["Diarrhea", "Hiding Behavior", "Depressed Mood"]

    def test_single_problem(self, healthy_answers):
        healthy_answers.eating = "4+"
        tips = get_health_tips(healthy_answers)
        assert len(tips) == 1
        assert tips[0].title == "Excessive Eating"
        assert tips[0].urgency == Urgency.LOW

    def test_unknown_code_is_skipped(self, healthy_answers):
        # Scores 0 but has no advisory entry
        healthy_answers.mood = "sleepy"
        assert get_health_tips(healthy_answers) == []

    def test_perfect_alternative_codes_skipped(self):
        answers = HealthAnswers(
            eating="2-3",
            water="normal",
            pee="2-4",
            poop="normal",
            activity="normal",
            mood="normal",
            vomiting="no",
            appetite="normal",
        )
        assert get_health_tips(answers) == []

    def test_custom_limit(self, worst_answers):
        assert len(get_health_tips(worst_answers, limit=5)) == 5

    def test_to_dict(self, healthy_answers):
        healthy_answers.vomiting = "once"
        data = get_health_tips(healthy_answers)[0].to_dict()
        assert data["category"] == "vomiting"
        assert data["urgency"] == "low"
        assert data["tips"][0] == "Monitor for additional episodes"
