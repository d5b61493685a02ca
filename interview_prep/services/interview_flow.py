from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from interview_prep.services.answer_classifier import ClassificationResult, classify_answer
from interview_prep.services.answer_scoring import AnswerEvaluation, evaluate_answer
from interview_prep.services.question_bank import Question, QuestionBank, question_bank


def greeting_message(
	user_name: Optional[str] = None,
	domain: Optional[str] = None,
	level: Optional[str] = None,
) -> str:
	name = f" {user_name}" if user_name else ""
	domain_text = f" for the {domain} position" if domain else ""
	level_text = f" at {level} level" if level else ""
	return (
		f"Hello{name}! Welcome to your technical interview practice session{domain_text}{level_text}. "
		"I'll be asking you some questions today. Let's begin!"
	)


def _string_list(value: Any) -> List[str]:
	if not isinstance(value, list):
		return []
	return [v for v in value if isinstance(v, str)]


@dataclass
class AnswerReview:
	question: Question
	classification: ClassificationResult
	evaluation: AnswerEvaluation
	next_question: Optional[Question]


def review_answer(
	domain: str,
	level: str,
	question_id: Any,
	answer: str,
	bank: Optional[QuestionBank] = None,
) -> Optional[AnswerReview]:
	"""Classify, score and route one answer to a catalog question.

	Returns None when the question is not in the catalog.
	"""
	bank = bank or question_bank
	question = bank.get_question(domain, level, question_id)
	if question is None:
		return None

	keywords = _string_list(question.get("keywords"))
	return AnswerReview(
		question=question,
		classification=classify_answer(answer, keywords),
		evaluation=evaluate_answer(answer, _string_list(question.get("expectedAnswers")), keywords),
		next_question=bank.get_next_question_by_keywords(domain, level, question_id, answer),
	)
