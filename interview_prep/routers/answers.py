from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from interview_prep.schemas import (
	ClassificationOut,
	ClassifyIn,
	EvaluateIn,
	EvaluationOut,
	ReviewIn,
	ReviewOut,
)
from interview_prep.services.answer_classifier import classify_answer
from interview_prep.services.answer_scoring import evaluate_answer
from interview_prep.services.interview_flow import review_answer
from interview_prep.utils.audit import auditor
from interview_prep.utils.security import verify_api_key


router = APIRouter(prefix="/answers", dependencies=[Depends(verify_api_key)])


@router.post("/classify", response_model=ClassificationOut)
async def classify(payload: ClassifyIn):
	result = classify_answer(payload.answer, payload.keywords)
	await auditor.log("classification", {
		"answer_chars": len(payload.answer),
		**result.to_dict(),
	})
	return ClassificationOut(**result.to_dict())


@router.post("/evaluate", response_model=EvaluationOut)
async def evaluate(payload: EvaluateIn):
	evaluation = evaluate_answer(payload.answer, payload.expected_answers, payload.keywords)
	return EvaluationOut(**asdict(evaluation))


@router.post("/review", response_model=ReviewOut)
async def review(payload: ReviewIn):
	result = review_answer(payload.domain, payload.level, payload.question_id, payload.answer)
	if result is None:
		raise HTTPException(status_code=404, detail="Question not found")

	await auditor.log("review", {
		"domain": payload.domain.lower(),
		"level": payload.level.lower(),
		"question_id": payload.question_id,
		"verdict": result.classification.verdict,
		"score": result.evaluation.score,
		"next_question_id": (result.next_question or {}).get("id"),
	})
	return ReviewOut(
		question=result.question,
		classification=ClassificationOut(**result.classification.to_dict()),
		evaluation=EvaluationOut(**asdict(result.evaluation)),
		next_question=result.next_question,
	)
