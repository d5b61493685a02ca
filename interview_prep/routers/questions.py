from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from interview_prep.config import settings
from interview_prep.schemas import CatalogDomain, CatalogOut, GreetingOut, QuestionOut, QuestionsOut
from interview_prep.services.interview_flow import greeting_message
from interview_prep.services.question_bank import question_bank
from interview_prep.utils.security import verify_api_key


router = APIRouter(dependencies=[Depends(verify_api_key)])


@router.get("/catalog", response_model=CatalogOut)
async def get_catalog():
	domains = [
		CatalogDomain(domain=d, levels=question_bank.levels(d))
		for d in question_bank.domains()
	]
	return CatalogOut(domains=domains)


@router.get("/greeting", response_model=GreetingOut)
async def get_greeting(
	name: Optional[str] = None,
	domain: Optional[str] = None,
	level: Optional[str] = None,
):
	return GreetingOut(message=greeting_message(name, domain, level))


@router.get("/questions/{domain}/{level}", response_model=QuestionsOut)
async def get_questions(domain: str, level: str):
	# Unknown domain/level is an empty set, not a 404
	return QuestionsOut(questions=question_bank.get_questions(domain, level))


@router.get("/questions/{domain}/{level}/shuffled", response_model=QuestionsOut)
async def get_shuffled_questions(
	domain: str,
	level: str,
	count: Optional[int] = Query(default=None, ge=1),
):
	if count is None:
		count = settings.default_question_count
	if count > settings.max_question_count:
		raise HTTPException(status_code=422, detail=f"count must be at most {settings.max_question_count}")
	return QuestionsOut(questions=question_bank.get_shuffled_questions(domain, level, count))


@router.get("/questions/{domain}/{level}/first", response_model=QuestionOut)
async def get_first_question(domain: str, level: str):
	question = question_bank.get_first_question(domain, level)
	if question is None:
		raise HTTPException(status_code=404, detail="No questions for this domain and level")
	return QuestionOut(question=question)


@router.get("/questions/{domain}/{level}/{question_id}/next", response_model=QuestionOut)
async def get_next_question(domain: str, level: str, question_id: str, answer: str = ""):
	if question_bank.get_question(domain, level, question_id) is None:
		raise HTTPException(status_code=404, detail="Question not found")
	question = question_bank.get_next_question_by_keywords(domain, level, question_id, answer)
	if question is None:
		raise HTTPException(status_code=404, detail="No more questions")
	return QuestionOut(question=question)
