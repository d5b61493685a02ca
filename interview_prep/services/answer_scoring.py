from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence


KEYWORD_WEIGHT = 40.0
EXPECTED_ANSWER_WEIGHT = 60.0
MIN_EXPECTED_WORD_LENGTH = 4
MIN_EXPECTED_MATCH_RATIO = 0.3


@dataclass
class AnswerEvaluation:
	score: int
	feedback: str
	matched_keywords: List[str] = field(default_factory=list)


def _feedback_for(score: int) -> str:
	if score >= 80:
		return "Excellent answer! You covered the key points well."
	if score >= 60:
		return "Good answer! You mentioned some relevant points."
	if score >= 40:
		return "Your answer is on the right track, but could be more detailed."
	return "Consider reviewing this topic. Your answer missed some key concepts."


def evaluate_answer(
	answer: str,
	expected_answers: Sequence[str],
	keywords: Sequence[str],
) -> AnswerEvaluation:
	"""Score an answer from 0 to 100 by keyword and expected-answer overlap.

	Keywords share 40 points; expected answers share 60 points, each counting
	only when more than 30% of its significant words (longer than 3 chars)
	appear in the answer, weighted by that ratio.
	"""
	if not answer or not answer.strip():
		return AnswerEvaluation(score=0, feedback="No answer provided.")

	answer_lower = answer.lower()
	score = 0.0

	matched_keywords = [k for k in keywords if k.lower() in answer_lower]
	if keywords:
		score += KEYWORD_WEIGHT * len(matched_keywords) / len(keywords)

	for expected in expected_answers:
		words = [w for w in expected.lower().split() if len(w) >= MIN_EXPECTED_WORD_LENGTH]
		if not words:
			continue
		matched = sum(1 for w in words if w in answer_lower)
		ratio = matched / len(words)
		if ratio > MIN_EXPECTED_MATCH_RATIO:
			score += (EXPECTED_ANSWER_WEIGHT / len(expected_answers)) * ratio

	# half-up rounding; scores are never negative
	final = min(100, int(math.floor(score + 0.5)))

	feedback = _feedback_for(final)
	if matched_keywords:
		feedback += f" You mentioned: {', '.join(matched_keywords[:3])}."
	return AnswerEvaluation(score=final, feedback=feedback, matched_keywords=matched_keywords)
